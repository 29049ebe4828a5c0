"""
Check report rendering.

Provides functions for printing batch check results and single
documents to the terminal with rich.
"""

from __future__ import annotations

import datetime as dt
import json
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from content_frontmatter.models.document import Document
from content_frontmatter.models.file_report import FileReport, Problem
from content_frontmatter.utils.paths import display_path


def collect_problems(reports: list[FileReport]) -> list[Problem]:
	"""Flatten every report's problems, preserving report order."""
	problems: list[Problem] = []
	for report in reports:
		problems.extend(report.problems())
	return problems


def build_problem_table(problems: list[Problem]) -> Table:
	"""
	Build a table listing every problem.

	Parameters:
		problems: Problems to list.

	Returns:
		Rich Table with one row per problem.
	"""
	table = Table(
	    title="Front-matter problems",
	    box=box.ROUNDED,
	    show_header=True,
	    expand=True,
	    title_style="bold red",
	)
	table.add_column("File", style="bold")
	table.add_column("Kind")
	table.add_column("Field")
	table.add_column("Reason")
	for p in problems:
		style = "yellow" if p.kind == "ValidationError" else "red"
		table.add_row(
		    display_path(p.path),
		    Text(p.kind, style=style),
		    p.field or "",
		    p.reason,
		)
	return table


def print_check_report(reports: list[FileReport],
                       console: Console | None = None) -> int:
	"""
	Print the outcome of a check run.

	Parameters:
		reports: One FileReport per checked file.
		console: Console to print to; a new one by default.

	Returns:
		Number of files with at least one problem.
	"""
	console = console or Console()
	problems = collect_problems(reports)
	bad_files = sum(1 for r in reports if not r.ok)

	if problems:
		console.print(build_problem_table(problems))
	summary = (f"{len(reports)} file(s) checked, "
	           f"{bad_files} with problems, {len(problems)} problem(s)")
	style = "green" if not problems else "red"
	console.print(Text(summary, style=style))
	return bad_files


def _json_default(value: Any) -> Any:
	if isinstance(value, (dt.date, dt.time)):
		return value.isoformat()
	raise TypeError(f"{type(value).__name__} is not JSON serializable")


def document_summary(document: Document) -> dict[str, Any]:
	"""Return a JSON-ready summary of a document."""
	return {
	    "source": document.source,
	    "style": document.style.value if document.style else None,
	    "front_matter": document.to_dict(),
	    "body_length": len(document.body),
	    "errors": [e.model_dump() for e in document.errors],
	}


def print_document(document: Document,
                   console: Console | None = None) -> None:
	"""Print a document summary as JSON."""
	console = console or Console()
	console.print_json(
	    json.dumps(document_summary(document), default=_json_default))


__all__ = [
    "collect_problems",
    "build_problem_table",
    "print_check_report",
    "document_summary",
    "print_document",
]
