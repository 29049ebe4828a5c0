"""
Front-matter delimiter scanner.

Locates the leading metadata block of a content file and reports its
offsets. Supports ``---`` (YAML) and ``+++`` (TOML) delimiter lines.
"""

from __future__ import annotations

from content_frontmatter.errors import MalformedDocument
from content_frontmatter.models.document import DelimiterStyle, ScanResult


def _line_end(text: str, start: int) -> tuple[int, int]:
	"""Return (content_end, next_line_start) for the line at *start*."""
	nl = text.find("\n", start)
	if nl < 0:
		return len(text), len(text)
	return nl, nl + 1


def _is_delimiter(line: str, style: DelimiterStyle) -> bool:
	return line.rstrip() == style.delimiter


def detect_style(text: str) -> DelimiterStyle | None:
	"""
	Detect the delimiter style of the opening line.

	Parameters:
		text: Full document text.

	Returns:
		The style whose delimiter is the whole first line, else None.
	"""
	end, _ = _line_end(text, 0)
	first = text[:end]
	for style in DelimiterStyle:
		if _is_delimiter(first, style):
			return style
	return None


def scan_delimiters(text: str) -> ScanResult | None:
	"""
	Locate the front-matter block at the start of *text*.

	The opening delimiter must be the very first line. The closing
	delimiter is the next line consisting solely of the same marker.

	Parameters:
		text: Full document text.

	Returns:
		ScanResult with block and body offsets, or None when the text
		has no front matter.

	Raises:
		MalformedDocument: If the opening delimiter is never closed.
	"""
	style = detect_style(text)
	if style is None:
		return None

	_, block_start = _line_end(text, 0)
	pos = block_start
	while pos < len(text):
		end, nxt = _line_end(text, pos)
		if _is_delimiter(text[pos:end], style):
			return ScanResult(
			    style=style,
			    block_start=block_start,
			    block_end=pos,
			    body_start=nxt,
			)
		pos = nxt

	raise MalformedDocument(
	    f"opening '{style.delimiter}' delimiter has no matching closing "
	    f"'{style.delimiter}' line")


__all__ = ["scan_delimiters", "detect_style"]
