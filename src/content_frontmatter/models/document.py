"""
Document models.

Defines the immutable Document record handed to external renderers,
along with the delimiter style, scanner result and field error models
used while assembling it.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from content_frontmatter.errors import DocumentValidationError

FieldErrorReason = Literal["missing", "empty", "wrong-type"]

RECOGNIZED_FIELDS: tuple[str, ...] = (
    "title",
    "description",
    "author",
    "date",
    "tags",
    "aliases",
)
STRING_FIELDS: tuple[str, ...] = ("title", "description", "author")
LIST_FIELDS: tuple[str, ...] = ("tags", "aliases")


class DelimiterStyle(str, Enum):
	"""Front-matter delimiter convention."""

	YAML = "---"
	TOML = "+++"

	@property
	def delimiter(self) -> str:
		return self.value


class ScanResult(BaseModel):
	"""Offsets of the front-matter block located by the scanner.

	Attributes:
		style: Detected delimiter style.
		block_start: First character after the opening delimiter line.
		block_end: First character of the closing delimiter line.
		body_start: First character after the closing delimiter line.
	"""

	model_config = ConfigDict(frozen=True)

	style: DelimiterStyle
	block_start: int = Field(ge=0)
	block_end: int = Field(ge=0)
	body_start: int = Field(ge=0)


class FieldError(BaseModel):
	"""A single field-level validation problem."""

	model_config = ConfigDict(frozen=True)

	field: str = Field(description="Offending front-matter field")
	reason: FieldErrorReason = Field(description="Why the field is invalid")

	def __str__(self) -> str:
		return f"{self.field}: {self.reason}"


class Document(BaseModel):
	"""
	Normalized, immutable representation of one content file.

	``raw_text`` is always ``head + body``, where ``head`` is the opening
	delimiter line, ``front_matter_text`` and the closing delimiter line.
	Documents without front matter have an empty head.

	Attributes:
		raw_text: Full original file contents.
		front_matter: Decoded metadata, field name to value. Read-only;
			list values are stored as tuples. See to_dict().
		front_matter_text: Undecoded text between the delimiter lines.
		body: Text after the closing delimiter line.
		style: Delimiter style, or None when the file has no front matter.
		source: File identity, when loaded from disk.
		errors: Validation problems found for this document.
	"""

	model_config = ConfigDict(frozen=True)

	raw_text: str
	front_matter: Mapping[str, Any] = Field(default_factory=dict,
	                                       validate_default=True)
	front_matter_text: str = ""
	body: str = ""
	style: DelimiterStyle | None = None
	source: str | None = None
	errors: tuple[FieldError, ...] = ()

	@field_validator("front_matter", mode="after")
	@classmethod
	def freeze_front_matter(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
		"""Store the mapping read-only, with list values as tuples."""
		return MappingProxyType({
		    k: tuple(val) if isinstance(val, list) else val
		    for k, val in v.items()
		})

	def _string(self, name: str) -> str:
		value = self.front_matter.get(name)
		return value if isinstance(value, str) else ""

	def _list(self, name: str) -> list[str]:
		value = self.front_matter.get(name)
		return list(value) if isinstance(value, (list, tuple)) else []

	@property
	def title(self) -> str:
		return self._string("title")

	@property
	def description(self) -> str:
		return self._string("description")

	@property
	def author(self) -> str:
		return self._string("author")

	@property
	def date(self) -> dt.date | None:
		value = self.front_matter.get("date")
		return value if isinstance(value, dt.date) else None

	@property
	def tags(self) -> list[str]:
		return self._list("tags")

	@property
	def aliases(self) -> list[str]:
		return self._list("aliases")

	def to_dict(self) -> dict[str, Any]:
		"""Return a mutable copy of the front matter, lists as lists."""
		return {
		    k: list(v) if isinstance(v, tuple) else v
		    for k, v in self.front_matter.items()
		}

	@property
	def extra(self) -> dict[str, Any]:
		"""Fields outside the recognized set, preserved verbatim."""
		return {
		    k: v
		    for k, v in self.to_dict().items()
		    if k not in RECOGNIZED_FIELDS
		}

	@property
	def head(self) -> str:
		"""Delimited front-matter block exactly as it appears in raw_text."""
		return self.raw_text[:len(self.raw_text) - len(self.body)]

	@property
	def has_front_matter(self) -> bool:
		return self.style is not None

	@property
	def is_valid(self) -> bool:
		return not self.errors

	def raise_for_errors(self) -> "Document":
		"""
		Raise if validation found any problems.

		Returns:
			This document, so calls can be chained.

		Raises:
			DocumentValidationError: With every collected FieldError.
		"""
		if self.errors:
			raise DocumentValidationError(list(self.errors), self.source)
		return self


__all__ = [
    "DelimiterStyle",
    "Document",
    "FieldError",
    "FieldErrorReason",
    "ScanResult",
    "RECOGNIZED_FIELDS",
    "STRING_FIELDS",
    "LIST_FIELDS",
]
