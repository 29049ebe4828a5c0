"""Tests for check report rendering."""

from __future__ import annotations

import io
import json

from rich.console import Console

from content_frontmatter.core.loader import load_document
from content_frontmatter.errors import InvalidFieldValue
from content_frontmatter.models.file_report import FileReport
from content_frontmatter.ui.reporting import (
    collect_problems,
    document_summary,
    print_check_report,
    print_document,
)


def _console() -> tuple[Console, io.StringIO]:
	buf = io.StringIO()
	return Console(file=buf, width=200, color_system=None), buf


def _reports() -> list[FileReport]:
	return [
	    FileReport(path="ok.md", document=load_document("---\ntitle: x\n---\n")),
	    FileReport(path="untitled.md", document=load_document("body only")),
	    FileReport.from_exception(
	        "dated.md", InvalidFieldValue("date", "bad date", "dated.md")),
	]


def test_collect_problems_in_order() -> None:
	problems = collect_problems(_reports())
	assert [(p.path, p.kind, p.field, p.reason) for p in problems] == [
	    ("untitled.md", "ValidationError", "title", "missing"),
	    ("dated.md", "InvalidFieldValue", "date", "bad date"),
	]


def test_print_check_report_lists_everything() -> None:
	console, buf = _console()
	bad = print_check_report(_reports(), console=console)
	out = buf.getvalue()
	assert bad == 2
	assert "untitled.md" in out
	assert "dated.md" in out
	assert "3 file(s) checked, 2 with problems, 2 problem(s)" in out


def test_print_check_report_clean_run() -> None:
	console, buf = _console()
	bad = print_check_report(_reports()[:1], console=console)
	assert bad == 0
	assert "Front-matter problems" not in buf.getvalue()


def test_document_summary_and_json() -> None:
	doc = load_document('+++\ntitle = "T"\ndate = 2020-01-02\n+++\nabc')
	summary = document_summary(doc)
	assert summary["style"] == "+++"
	assert summary["body_length"] == 3
	assert summary["errors"] == []

	console, buf = _console()
	print_document(doc, console=console)
	data = json.loads(buf.getvalue())
	assert data["front_matter"] == {"title": "T", "date": "2020-01-02"}
