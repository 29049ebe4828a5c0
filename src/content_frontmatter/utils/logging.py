"""
Logging configuration module.

Provides centralized logging setup for the application with
configurable log levels and consistent formatting.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def relativize_paths(text: str, base: Path | None = None) -> str:
	"""Shorten absolute paths under *base* to base-relative ones.

	Parameters:
		text: Message text that may contain absolute file paths.
		base: Directory to strip; defaults to the working directory.

	Returns:
		Text with ``<base>/`` prefixes removed.
	"""
	prefix = str(base or Path.cwd()).rstrip(os.sep) + os.sep
	return text.replace(prefix, "")


class ContentPathFilter(logging.Filter):
	"""Logging filter that prints content paths relative to the cwd.

	Installed on the root handlers so every module's records get short
	file identities without call-site awareness.
	"""

	def filter(self, record: logging.LogRecord) -> bool:
		"""Relativize paths in the log record message and args."""
		if isinstance(record.msg, str):
			record.msg = relativize_paths(record.msg)
		if record.args:
			if isinstance(record.args, dict):
				record.args = {
				    k: relativize_paths(v) if isinstance(v, str) else v
				    for k, v in record.args.items()
				}
			elif isinstance(record.args, tuple):
				record.args = tuple(
				    relativize_paths(a) if isinstance(a, str) else a
				    for a in record.args)
		return True


def configure_logging(level: str = "info") -> None:
	"""
	Configure basic logging with level, format, and path shortening.

	Parameters:
		level: Log level string (e.g., "info", "debug", "warning").
	"""
	lvl = logging.getLevelName(level.upper())
	if not isinstance(lvl, int):
		lvl = logging.INFO
	logging.basicConfig(level=lvl, format=LOG_FORMAT)
	root = logging.getLogger()
	root.setLevel(lvl)
	# Handler filters also see records propagated from child loggers.
	for handler in root.handlers:
		if not any(isinstance(f, ContentPathFilter) for f in handler.filters):
			handler.addFilter(ContentPathFilter())


def get_logger(name: str) -> logging.Logger:
	"""
	Get a logger for the specified module.

	Parameters:
		name: The logger name, typically __name__.

	Returns:
		Configured logger instance.
	"""
	return logging.getLogger(name)


__all__ = [
    "configure_logging",
    "get_logger",
    "relativize_paths",
    "ContentPathFilter",
]
