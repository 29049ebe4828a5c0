"""User interface components.

This subpackage provides terminal output rendering for check runs
and single documents.

Key modules:
    - reporting: Rich tables and JSON document summaries
"""

from content_frontmatter.ui.reporting import (
    collect_problems,
    build_problem_table,
    print_check_report,
    document_summary,
    print_document,
)

__all__ = [
    "collect_problems",
    "build_problem_table",
    "print_check_report",
    "document_summary",
    "print_document",
]
