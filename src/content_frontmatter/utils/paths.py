"""
Path safety utilities.

Provides functions for keeping discovered content files inside the
content root and for printing short file identities.
"""

from __future__ import annotations

from pathlib import Path


def ensure_within(base: Path, path: Path) -> Path:
	"""
	Ensure a path is within the specified base directory.

	Parameters:
		base: The allowed base directory.
		path: The path to validate.

	Returns:
		The original path if valid.

	Raises:
		ValueError: If path escapes the base directory.
	"""
	resolved_base = base.resolve()
	resolved_path = path.resolve()
	if resolved_path == resolved_base or resolved_path.is_relative_to(
	    resolved_base):
		return path
	raise ValueError(f"Path {resolved_path} escapes base {resolved_base}")


def display_path(path: Path | str, base: Path | None = None) -> str:
	"""Return *path* relative to *base* (default cwd) when possible."""
	p = Path(path)
	root = (base or Path.cwd()).resolve()
	try:
		return str(p.resolve().relative_to(root))
	except ValueError:
		return str(p)


__all__ = ["ensure_within", "display_path"]
