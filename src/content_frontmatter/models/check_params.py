"""
Check parameters model.

Defines validated parameters for a CLI check invocation. Fields left
as None keep the environment-based Config values.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_core.core_schema import ValidationInfo


class CheckParams(BaseModel):
	"""Validated parameters for the ``check`` command."""

	paths: list[str] = Field(default_factory=list,
	                         description="Files or directories to check")
	pattern: Optional[str] = Field(default=None,
	                               description="Override content glob")
	max_workers: Optional[int] = Field(default=None,
	                                   description="Override worker count")
	required: Optional[list[str]] = Field(
	    default=None, description="Override required fields")

	@field_validator('pattern')
	@classmethod
	def validate_pattern(cls, v: Optional[str]) -> Optional[str]:
		if v is not None and not v.strip():
			raise ValueError("pattern must not be empty")
		return v

	@field_validator('max_workers')
	@classmethod
	def validate_positive(cls, v: Optional[int],
	                      info: ValidationInfo) -> Optional[int]:
		if v is None:
			return v
		if v <= 0:
			raise ValueError(f"{info.field_name} must be > 0")
		return v

	@field_validator('required')
	@classmethod
	def strip_required(cls, v: Optional[list[str]]) -> Optional[list[str]]:
		if v is None:
			return v
		return [f.strip() for f in v if f.strip()]


__all__ = ["CheckParams"]
