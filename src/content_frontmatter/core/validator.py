"""Front-matter validation.

Inspects a decoded front-matter mapping and reports every field-level
problem in one pass.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterable, Mapping
from typing import Any

from content_frontmatter.models.document import (
    FieldError,
    LIST_FIELDS,
    STRING_FIELDS,
)

DEFAULT_REQUIRED_FIELDS: tuple[str, ...] = ("title", )


def _is_empty(value: Any) -> bool:
	if value is None:
		return True
	if isinstance(value, str):
		return not value.strip()
	if isinstance(value, (list, tuple)):
		return not value
	return False


def _has_expected_type(name: str, value: Any) -> bool:
	if name in STRING_FIELDS:
		return isinstance(value, str)
	if name in LIST_FIELDS:
		return isinstance(value, (list, tuple)) and all(
		    isinstance(v, str) for v in value)
	if name == "date":
		return isinstance(value, dt.date) and not isinstance(
		    value, dt.datetime)
	return True


def validate_front_matter(
    front_matter: Mapping[str, Any],
    required: Iterable[str] = DEFAULT_REQUIRED_FIELDS,
) -> list[FieldError]:
	"""
	Validate a decoded front-matter mapping.

	``title`` is always required. Recognized optional fields are only
	type-checked when present; unknown fields are ignored.

	Parameters:
		front_matter: Decoded mapping. Not modified.
		required: Field names that must be present and non-empty.

	Returns:
		List of FieldError, empty when the mapping is valid.
	"""
	errors: list[FieldError] = []
	required_fields = list(dict.fromkeys(["title", *required]))

	for name in required_fields:
		if name not in front_matter:
			errors.append(FieldError(field=name, reason="missing"))
			continue
		value = front_matter[name]
		if value is not None and not _has_expected_type(name, value):
			errors.append(FieldError(field=name, reason="wrong-type"))
		elif _is_empty(value):
			errors.append(FieldError(field=name, reason="empty"))

	for name, value in front_matter.items():
		if name in required_fields or value is None:
			continue
		if not _has_expected_type(name, value):
			errors.append(FieldError(field=name, reason="wrong-type"))

	return errors


__all__ = ["validate_front_matter", "DEFAULT_REQUIRED_FIELDS"]
