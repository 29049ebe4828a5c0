"""
Content file access.

Provides functions for discovering Markdown content files under a
content root and reading them from disk.
"""

from __future__ import annotations

from pathlib import Path

from content_frontmatter.utils.logging import get_logger
from content_frontmatter.utils.paths import ensure_within

logger = get_logger(__name__)


def read_content(path: str | Path) -> str:
	"""
	Read a content file as UTF-8 text.

	A leading byte-order mark is dropped and line endings are kept
	exactly as stored.

	Parameters:
		path: File to read.

	Returns:
		File contents.
	"""
	with open(path, "r", encoding="utf-8-sig", newline="") as fh:
		return fh.read()


def discover_content_files(root: str | Path,
                           pattern: str = "**/*.md") -> list[Path]:
	"""
	Find content files under *root*.

	Files reached through symlinks that point outside the root are
	skipped.

	Parameters:
		root: Content directory, or a single file.
		pattern: Glob pattern relative to *root*.

	Returns:
		Sorted list of matching file paths.

	Raises:
		FileNotFoundError: If *root* does not exist.
	"""
	root = Path(root)
	if not root.exists():
		raise FileNotFoundError(f"content path not found: {root}")
	if root.is_file():
		return [root]

	found: list[Path] = []
	for p in sorted(root.glob(pattern)):
		if not p.is_file():
			continue
		try:
			ensure_within(root, p)
		except ValueError:
			logger.warning("skipping %s: resolves outside %s", p, root)
			continue
		found.append(p)
	logger.debug("discovered %d content file(s) under %s", len(found), root)
	return found


__all__ = ["read_content", "discover_content_files"]
