"""
Document serialization.

Turns a Document back into text with a delimited front-matter block,
using the document's own delimiter style unless another is requested.
"""

from __future__ import annotations

import datetime as dt
import json
import re
from typing import Any

import yaml

from content_frontmatter.models.document import DelimiterStyle, Document

BARE_KEY_RE = re.compile(r"^[A-Za-z0-9_-]+$")


def dump_yaml(front_matter: dict[str, Any]) -> str:
	"""Serialize a mapping as a YAML block, flow style for lists."""
	if not front_matter:
		return ""
	return yaml.safe_dump(
	    front_matter,
	    sort_keys=False,
	    allow_unicode=True,
	    default_flow_style=None,
	    width=1000,
	)


def _toml_value(value: Any) -> str:
	if isinstance(value, bool):
		return "true" if value else "false"
	if isinstance(value, (int, float)):
		return repr(value)
	if isinstance(value, (dt.date, dt.time)):
		return value.isoformat()
	if isinstance(value, str):
		return json.dumps(value, ensure_ascii=False)
	if isinstance(value, list):
		return "[" + ", ".join(_toml_value(v) for v in value) + "]"
	raise ValueError(f"cannot write {type(value).__name__} value as TOML")


def dump_toml(front_matter: dict[str, Any]) -> str:
	"""
	Serialize a flat mapping as a TOML block.

	Only the grammar the decoder accepts is supported: strings,
	numbers, booleans, dates and lists of those.

	Raises:
		ValueError: For null or nested values, which TOML cannot hold
			in a flat key/value block.
	"""
	lines: list[str] = []
	for key, value in front_matter.items():
		if value is None:
			raise ValueError(f"field '{key}' is null; TOML has no null value")
		if isinstance(value, dict):
			raise ValueError(f"field '{key}' is nested")
		name = key if BARE_KEY_RE.match(key) else json.dumps(key)
		lines.append(f"{name} = {_toml_value(value)}\n")
	return "".join(lines)


_DUMPERS = {
    DelimiterStyle.YAML: dump_yaml,
    DelimiterStyle.TOML: dump_toml,
}


def render_document(document: Document,
                    style: DelimiterStyle | None = None) -> str:
	"""
	Render a Document to text.

	Parameters:
		document: Document to serialize.
		style: Delimiter style; defaults to the document's own style,
			or ``---`` when the document had no front matter.

	Returns:
		Delimited front-matter block followed by the body.
	"""
	style = style or document.style or DelimiterStyle.YAML
	block = _DUMPERS[style](document.to_dict())
	return f"{style.delimiter}\n{block}{style.delimiter}\n{document.body}"


__all__ = ["render_document", "dump_yaml", "dump_toml"]
