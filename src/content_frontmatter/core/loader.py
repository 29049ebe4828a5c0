"""
Document assembly.

Runs the scan -> decode -> validate pipeline over raw text or a
content file and assembles the immutable Document record.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from content_frontmatter.core.decoder import decode_metadata
from content_frontmatter.core.scanner import scan_delimiters
from content_frontmatter.core.validator import (
    DEFAULT_REQUIRED_FIELDS,
    validate_front_matter,
)
from content_frontmatter.errors import FrontMatterError
from content_frontmatter.loaders.content import read_content
from content_frontmatter.models.document import Document
from content_frontmatter.utils.logging import get_logger

logger = get_logger(__name__)


def load_document(
    text: str,
    source: str | Path | None = None,
    required: Iterable[str] = DEFAULT_REQUIRED_FIELDS,
) -> Document:
	"""
	Parse raw text into a validated Document.

	Text without a leading delimiter line yields an empty mapping and
	a body equal to the whole text; the validator then reports the
	missing title.

	Parameters:
		text: Full document text.
		source: Optional file identity attached to the Document and to
			any raised error.
		required: Field names that must be present and non-empty.

	Returns:
		Document with any validation problems in ``errors``.

	Raises:
		MalformedDocument: If the opening delimiter is never closed.
		MalformedFrontMatter: On a syntax error inside the block.
		InvalidFieldValue: If a recognized field has the wrong shape.
	"""
	try:
		scan = scan_delimiters(text)
		if scan is None:
			front_matter = {}
			block = ""
			body = text
			style = None
		else:
			block = text[scan.block_start:scan.block_end]
			front_matter = decode_metadata(block, scan.style)
			body = text[scan.body_start:]
			style = scan.style
	except FrontMatterError as exc:
		if source is not None:
			exc.with_source(source)
		raise

	errors = validate_front_matter(front_matter, required)
	if errors:
		logger.debug("%s: %d validation error(s)", source or "<text>",
		             len(errors))
	return Document(
	    raw_text=text,
	    front_matter=front_matter,
	    front_matter_text=block,
	    body=body,
	    style=style,
	    source=str(source) if source is not None else None,
	    errors=tuple(errors),
	)


def load_file(
    path: str | Path,
    required: Iterable[str] = DEFAULT_REQUIRED_FIELDS,
) -> Document:
	"""
	Load a content file into a Document.

	Parameters:
		path: Markdown file with optional front matter.
		required: Field names that must be present and non-empty.

	Returns:
		Document whose ``source`` is the file path.

	Raises:
		OSError: If the file cannot be read.
		UnicodeDecodeError: If the file is not UTF-8.
		FrontMatterError: On scan or decode failures, carrying the path.
	"""
	path = Path(path)
	text = read_content(path)
	doc = load_document(text, source=path, required=required)
	logger.debug("loaded %s (%s, %d field(s))", path,
	             doc.style.name if doc.style else "no front matter",
	             len(doc.front_matter))
	return doc


__all__ = ["load_document", "load_file"]
