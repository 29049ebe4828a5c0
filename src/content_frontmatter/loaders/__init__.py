"""File loading utilities.

This subpackage handles finding and reading content files on disk.

Key modules:
    - content: Content discovery and UTF-8 file reading
"""

from .content import read_content, discover_content_files

__all__ = [
    "read_content",
    "discover_content_files",
]
