"""
Per-file load outcome model.

Defines the FileReport produced for every file in a batch load, and
the flattened problem rows used by the check report.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from content_frontmatter.errors import FrontMatterError, InvalidFieldValue
from content_frontmatter.models.document import Document


class Problem(BaseModel):
	"""One reportable problem in one file."""

	path: str = Field(description="File the problem was found in")
	kind: str = Field(description="Error class name or 'ValidationError'")
	field: str | None = Field(default=None, description="Offending field")
	reason: str = Field(description="Human-readable reason")


class FileReport(BaseModel):
	"""
	Outcome of loading one content file.

	Exactly one of ``document`` and ``error`` is set.

	Attributes:
		path: The file that was loaded.
		document: Loaded document, when scanning and decoding succeeded.
		error: Reason the load aborted, when it did.
		error_type: Exception class name for ``error``.
		error_field: Field named by an InvalidFieldValue error.
	"""

	path: str
	document: Document | None = None
	error: str | None = None
	error_type: str | None = None
	error_field: str | None = None

	@classmethod
	def from_exception(cls, path: str, exc: BaseException) -> "FileReport":
		"""Build a failed report from a load exception."""
		reason = exc.reason if isinstance(exc, FrontMatterError) else str(exc)
		field = exc.field if isinstance(exc, InvalidFieldValue) else None
		return cls(
		    path=path,
		    error=reason,
		    error_type=type(exc).__name__,
		    error_field=field,
		)

	@property
	def ok(self) -> bool:
		return self.document is not None and self.document.is_valid

	def problems(self) -> list[Problem]:
		"""Flatten this report into problem rows."""
		if self.error is not None:
			return [
			    Problem(
			        path=self.path,
			        kind=self.error_type or "Error",
			        field=self.error_field,
			        reason=self.error,
			    )
			]
		if self.document is None:
			return []
		return [
		    Problem(
		        path=self.path,
		        kind="ValidationError",
		        field=e.field,
		        reason=e.reason,
		    ) for e in self.document.errors
		]


__all__ = ["FileReport", "Problem"]
