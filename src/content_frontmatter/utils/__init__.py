"""Shared utility functions.

This subpackage provides common utility functions used across
the application with no dependencies on other subpackages.

Key modules:
    - paths: Path safety and display utilities
    - logging: Logging configuration
"""

from .paths import ensure_within, display_path
from .logging import configure_logging, get_logger

__all__ = [
    # paths
    "ensure_within",
    "display_path",
    # logging
    "configure_logging",
    "get_logger",
]
