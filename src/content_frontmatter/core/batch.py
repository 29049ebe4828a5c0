"""
Batch loading of content files.

Loads many files concurrently. Loads share no state, so one file's
failure is recorded in its own FileReport and never affects another.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Sequence
from pathlib import Path

from content_frontmatter.core.loader import load_file
from content_frontmatter.core.validator import DEFAULT_REQUIRED_FIELDS
from content_frontmatter.errors import FrontMatterError
from content_frontmatter.loaders.content import discover_content_files
from content_frontmatter.models.config import Config
from content_frontmatter.models.file_report import FileReport
from content_frontmatter.utils.logging import get_logger

logger = get_logger(__name__)

# Failures that belong to one file; anything else is a bug and propagates.
_FILE_ERRORS = (FrontMatterError, OSError, UnicodeDecodeError)


async def load_many(
    paths: Sequence[str | Path],
    max_workers: int = 8,
    required: Iterable[str] = DEFAULT_REQUIRED_FIELDS,
) -> list[FileReport]:
	"""
	Load content files concurrently.

	Parameters:
		paths: Files to load.
		max_workers: Maximum number of files read at once.
		required: Field names that must be present and non-empty.

	Returns:
		One FileReport per path, in input order.
	"""
	if max_workers <= 0:
		raise ValueError("max_workers must be > 0")
	required = tuple(required)
	sem = asyncio.Semaphore(max_workers)

	async def load_one(path: Path):
		async with sem:
			return await asyncio.to_thread(load_file, path, required)

	tasks = [asyncio.create_task(load_one(Path(p))) for p in paths]
	results_raw = await asyncio.gather(*tasks, return_exceptions=True)

	reports: list[FileReport] = []
	for path, res in zip(paths, results_raw):
		if isinstance(res, _FILE_ERRORS):
			logger.warning("failed to load: %s", res)
			reports.append(FileReport.from_exception(str(path), res))
		elif isinstance(res, BaseException):
			raise res
		else:
			if not res.is_valid:
				logger.debug("%s: %s", path,
				             ", ".join(str(e) for e in res.errors))
			reports.append(FileReport(path=str(path), document=res))
	return reports


async def check_content(
    config: Config,
    paths: Sequence[str | Path] | None = None,
) -> list[FileReport]:
	"""
	Discover and load every content file for a check run.

	Parameters:
		config: Runtime configuration.
		paths: Files or directories to check; defaults to the
			configured content directory.

	Returns:
		FileReports for every discovered file, in discovery order.
	"""
	roots = list(paths) if paths else [config.content_path]
	files: list[Path] = []
	for root in roots:
		files.extend(discover_content_files(root, config.content_glob))
	logger.info("checking %d content file(s)", len(files))
	return await load_many(
	    files,
	    max_workers=config.max_workers,
	    required=config.required_fields,
	)


__all__ = ["load_many", "check_content"]
