from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_core.core_schema import ValidationInfo
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv


def load_env(env_file: str | Path | None = None) -> None:
	"""Load environment variables from an `.env` file if present."""
	env_path = Path(env_file) if env_file else Path(".env")
	if env_path.exists():
		load_dotenv(env_path)


def _split_fields(v: Any) -> list[str]:
	if v is None or v == "":
		return ["title"]
	if isinstance(v, (list, tuple)):
		items = [str(p).strip() for p in v]
	else:
		# fallback: comma-separated string
		items = [p.strip() for p in str(v).split(",")]
	items = [p for p in items if p]
	if "title" not in items:
		items.insert(0, "title")
	return list(dict.fromkeys(items))


class Config(BaseSettings):
	"""Runtime configuration loaded from environment variables."""

	model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

	content_dir: str = Field(
	    "content",
	    alias="CONTENT_DIR",
	    description="Root directory of the site's content files",
	)
	content_glob: str = Field(
	    "**/*.md",
	    alias="CONTENT_GLOB",
	    description="Glob selecting content files under content_dir",
	)
	required_fields: Any = Field(
	    default_factory=lambda: ["title"],
	    alias="REQUIRED_FIELDS",
	    description="Front-matter fields that must be present and non-empty",
	)
	max_workers: int = Field(
	    8,
	    alias="MAX_WORKERS",
	    description="Maximum files loaded concurrently",
	)
	log_level: str = Field("info", alias="LOG_LEVEL",
	                       description="Log level")

	@field_validator("required_fields", mode="before")
	@classmethod
	def split_required_fields(cls, v: Any) -> list[str]:
		"""Normalize required fields to a list; title is always included."""
		return _split_fields(v)

	@field_validator("max_workers")
	@classmethod
	def validate_positive(cls, v: Any, info: "ValidationInfo") -> Any:
		if int(v) <= 0:
			raise ValueError(f"{info.field_name} must be > 0")
		return v

	@property
	def content_path(self) -> Path:
		"""Return content_dir as Path."""
		return Path(self.content_dir)

	def apply_overrides(self, params: "CheckParams") -> None:
		"""Apply CLI overrides from CheckParams onto this config.

		Only non-None fields in params are applied, preserving
		environment-based defaults for anything the user didn't set.

		Parameters:
			params: Validated check parameters with optional overrides.
		"""
		_OVERRIDES: list[tuple[str, str]] = [
		    ("pattern", "content_glob"),
		    ("max_workers", "max_workers"),
		    ("required", "required_fields"),
		]
		for param_field, config_field in _OVERRIDES:
			value = getattr(params, param_field)
			if value is not None:
				if config_field == "required_fields":
					value = _split_fields(value)
				setattr(self, config_field, value)


__all__ = ["Config", "load_env"]
