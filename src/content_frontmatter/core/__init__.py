"""Core front-matter loading logic.

This subpackage contains the scan -> decode -> validate -> assemble
pipeline and the batch loader built on it.

Key modules:
    - scanner: Delimiter detection and block offsets
    - decoder: YAML/TOML metadata decoding and normalization
    - validator: Field-level validation
    - loader: Document assembly from text or file
    - render: Document serialization
    - batch: Concurrent loading of many files
"""

from content_frontmatter.core.scanner import scan_delimiters, detect_style
from content_frontmatter.core.decoder import decode_metadata, parse_date
from content_frontmatter.core.validator import (
    DEFAULT_REQUIRED_FIELDS,
    validate_front_matter,
)
from content_frontmatter.core.loader import load_document, load_file
from content_frontmatter.core.render import render_document
from content_frontmatter.core.batch import load_many, check_content

__all__ = [
    # scanner
    "scan_delimiters",
    "detect_style",
    # decoder
    "decode_metadata",
    "parse_date",
    # validator
    "DEFAULT_REQUIRED_FIELDS",
    "validate_front_matter",
    # loader
    "load_document",
    "load_file",
    # render
    "render_document",
    # batch
    "load_many",
    "check_content",
]
