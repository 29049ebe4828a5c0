"""
Content front-matter models.

This subpackage contains Pydantic models for configuration, loaded
documents, and batch load outcomes.

Key models:
    - Config: Application configuration loaded from environment
    - CheckParams: Parameters for a check run
    - Document: Normalized, immutable content document
    - FieldError: One field-level validation problem
    - FileReport: Outcome of loading one file in a batch
"""

from .config import Config, load_env
from .check_params import CheckParams
from .document import (
    DelimiterStyle,
    Document,
    FieldError,
    ScanResult,
    RECOGNIZED_FIELDS,
)
from .file_report import FileReport, Problem

__all__ = [
    "Config",
    "load_env",
    "CheckParams",
    "DelimiterStyle",
    "Document",
    "FieldError",
    "ScanResult",
    "RECOGNIZED_FIELDS",
    "FileReport",
    "Problem",
]
