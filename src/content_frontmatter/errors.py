"""
Exception hierarchy for front-matter loading.

Scan and decode failures abort the load of a single document.
Validation problems are collected and raised together as one
DocumentValidationError.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from content_frontmatter.models.document import FieldError


class FrontMatterError(Exception):
	"""Base class for all loader errors.

	Attributes:
		reason: Human-readable description of the problem.
		source: Identity of the offending file, when known.
	"""

	def __init__(self, reason: str, source: str | Path | None = None):
		self.reason = reason
		self.source = str(source) if source is not None else None
		super().__init__(str(self))

	def __str__(self) -> str:
		if self.source:
			return f"{self.source}: {self.reason}"
		return self.reason

	def with_source(self, source: str | Path) -> "FrontMatterError":
		"""Attach a file identity to this error and return it."""
		self.source = str(source)
		self.args = (str(self), )
		return self


class MalformedDocument(FrontMatterError):
	"""Opening delimiter present without a matching closing delimiter."""


class MalformedFrontMatter(FrontMatterError):
	"""Syntax error inside the metadata block."""


class InvalidFieldValue(FrontMatterError):
	"""A recognized field's value does not have its expected shape."""

	def __init__(self, field: str, reason: str,
	             source: str | Path | None = None):
		self.field = field
		super().__init__(reason, source)


class DocumentValidationError(FrontMatterError):
	"""One or more field-level problems found by the validator."""

	def __init__(self, errors: list[FieldError],
	             source: str | Path | None = None):
		self.errors = list(errors)
		reason = "; ".join(f"{e.field}: {e.reason}" for e in self.errors)
		super().__init__(reason or "invalid document", source)


__all__ = [
    "FrontMatterError",
    "MalformedDocument",
    "MalformedFrontMatter",
    "InvalidFieldValue",
    "DocumentValidationError",
]
