"""
Front-matter metadata decoder.

Parses the text of a delimited metadata block into a flat mapping.
The ``---`` style is decoded as YAML and the ``+++`` style as TOML;
both then go through the same normalization of lists and dates.
"""

from __future__ import annotations

import datetime as dt
import re
import tomllib
from typing import Any

import yaml

from content_frontmatter.errors import InvalidFieldValue, MalformedFrontMatter
from content_frontmatter.models.document import DelimiterStyle
from content_frontmatter.utils.logging import get_logger

logger = get_logger(__name__)

DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
DATE_FIELDS: tuple[str, ...] = ("date", )


class _UniqueKeyLoader(yaml.SafeLoader):
	"""SafeLoader that rejects a key repeated within one mapping."""

	def construct_mapping(self, node, deep=False):
		seen = set()
		for key_node, _ in node.value:
			if key_node.tag == "tag:yaml.org,2002:merge":
				continue
			key = self.construct_object(key_node, deep=deep)
			try:
				duplicate = key in seen
				seen.add(key)
			except TypeError:
				continue
			if duplicate:
				raise yaml.constructor.ConstructorError(
				    None, None, f"duplicate key {key!r}", key_node.start_mark)
		return super().construct_mapping(node, deep=deep)


def _parse_yaml(block: str) -> Any:
	try:
		return yaml.load(block, Loader=_UniqueKeyLoader)
	except yaml.YAMLError as exc:
		mark = getattr(exc, "problem_mark", None)
		where = f" (line {mark.line + 1})" if mark is not None else ""
		problem = getattr(exc, "problem", None) or str(exc)
		raise MalformedFrontMatter(f"invalid YAML front matter{where}: "
		                           f"{problem}") from exc
	except ValueError as exc:
		# yaml builds timestamps eagerly, e.g. 2022-02-30 fails here
		raise MalformedFrontMatter(
		    f"invalid YAML front matter: {exc}") from exc


def _parse_toml(block: str) -> Any:
	try:
		return tomllib.loads(block)
	except tomllib.TOMLDecodeError as exc:
		raise MalformedFrontMatter(
		    f"invalid TOML front matter: {exc}") from exc


_PARSERS = {
    DelimiterStyle.YAML: _parse_yaml,
    DelimiterStyle.TOML: _parse_toml,
}


def parse_date(field: str, value: Any) -> dt.date:
	"""
	Coerce a decoded value into a calendar date.

	Parameters:
		field: Field name, used in the error.
		value: A ``datetime.date`` or a ``YYYY-MM-DD`` string.

	Returns:
		The calendar date.

	Raises:
		InvalidFieldValue: If the value is not a plain calendar date.
	"""
	if isinstance(value, dt.datetime):
		raise InvalidFieldValue(
		    field, f"'{field}' must be a YYYY-MM-DD date, not a timestamp")
	if isinstance(value, dt.date):
		return value
	if isinstance(value, str) and DATE_RE.match(value):
		try:
			return dt.date.fromisoformat(value)
		except ValueError as exc:
			raise InvalidFieldValue(
			    field, f"'{field}' is not a calendar date: {value!r}") from exc
	raise InvalidFieldValue(
	    field, f"'{field}' must match YYYY-MM-DD, got {value!r}")


def _scalar_text(value: Any) -> str:
	if isinstance(value, bool):
		return "true" if value else "false"
	if isinstance(value, (dt.date, dt.time)):
		return value.isoformat()
	return str(value)


def _normalize_list(key: str, items: list[Any]) -> list[str]:
	out: list[str] = []
	for item in items:
		if isinstance(item, (list, dict)):
			raise MalformedFrontMatter(
			    f"nested values are not supported in list '{key}'")
		if item is None:
			raise MalformedFrontMatter(f"empty item in list '{key}'")
		out.append(_scalar_text(item))
	return out


def normalize_metadata(data: Any) -> dict[str, Any]:
	"""
	Normalize a parsed block into the flat front-matter mapping.

	Lists become ordered lists of strings, date fields become
	``datetime.date`` and every other key is kept verbatim.

	Parameters:
		data: Result of the style-specific parser.

	Returns:
		Flat mapping of field name to value.

	Raises:
		MalformedFrontMatter: If the block is not a flat mapping.
		InvalidFieldValue: If a date field is not a calendar date.
	"""
	if data is None:
		return {}
	if not isinstance(data, dict):
		raise MalformedFrontMatter(
		    "front matter must be key/value pairs; found a bare "
		    f"{type(data).__name__}")

	result: dict[str, Any] = {}
	for raw_key, value in data.items():
		key = _scalar_text(raw_key)
		if isinstance(value, dict):
			raise MalformedFrontMatter(
			    f"nested structures are not supported (field '{key}')")
		if isinstance(value, list):
			value = _normalize_list(key, value)
		elif key in DATE_FIELDS and value is not None:
			value = parse_date(key, value)
		result[key] = value
	return result


def decode_metadata(block: str, style: DelimiterStyle) -> dict[str, Any]:
	"""
	Decode a front-matter block.

	Parameters:
		block: Text between the opening and closing delimiter lines.
		style: Delimiter style the block was found with.

	Returns:
		Flat mapping of field name to value.

	Raises:
		MalformedFrontMatter: On syntax errors or unsupported nesting.
		InvalidFieldValue: If a date field is not a calendar date.
	"""
	data = _PARSERS[style](block)
	metadata = normalize_metadata(data)
	logger.debug("decoded %d %s front-matter field(s)", len(metadata),
	             style.name)
	return metadata


__all__ = [
    "decode_metadata",
    "normalize_metadata",
    "parse_date",
    "DATE_RE",
    "DATE_FIELDS",
]
