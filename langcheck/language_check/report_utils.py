"""Utilities for generating language check reports.

This module centralises the Markdown and CSV report builders used by the
language check workflow, so they can be tested independently from the
document scanning routines.
"""

from __future__ import annotations

from typing import Iterable, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .language_check import DocumentReport

_EMPTY_CELL = "-"


def _escape(value: str) -> str:
    return value.replace("|", "\\|")


def _sorted_reports(reports: Iterable["DocumentReport"]) -> list["DocumentReport"]:
    return sorted(reports, key=lambda item: (item.language, str(item.path).lower()))


def build_report_markdown(reports: Iterable["DocumentReport"]) -> str:
    """Convert the collected document reports into Markdown output."""

    report_list = list(reports)
    total_documents = len(report_list)
    total_issues = sum(len(report.issues) for report in report_list)

    language_totals: dict[str, int] = {}
    language_documents: dict[str, int] = {}
    for report in report_list:
        language_totals[report.language] = language_totals.get(report.language, 0) + len(report.issues)
        language_documents[report.language] = language_documents.get(report.language, 0) + 1

    lines: list[str] = []
    lines.append("# Language Check Report")
    lines.append("")
    lines.append(f"- Checked {total_documents} document(s)")
    lines.append(f"- Total issues found: {total_issues}")

    lines.append("")
    lines.append("## Totals by Language")
    if language_totals:
        for language in sorted(language_totals):
            lines.append(
                f"- {language}: {language_totals[language]} issue(s) across "
                f"{language_documents[language]} document(s)"
            )
    else:
        lines.append("- No documents checked.")

    lines.append("")
    lines.append("---")
    lines.append("")
    lines.append("## Document Details")
    if not report_list:
        lines.append("")
        lines.append("_No documents found for checking._")
        return "\n".join(lines)

    for report in _sorted_reports(report_list):
        lines.append("")
        lines.append(f"### {report.path.name} ({report.language})")
        lines.append("")
        if not report.issues:
            lines.append("_No issues found._")
            continue

        lines.append(f"Found {len(report.issues)} issue(s).")
        lines.append("")
        lines.append("| Filename | Line | Column | Rule | Type | Issue | Message | Context |")
        lines.append("| --- | --- | --- | --- | --- | --- | --- | --- |")
        for issue in report.issues:
            line = str(issue.line) if issue.line is not None else _EMPTY_CELL
            column = str(issue.column) if issue.column is not None else _EMPTY_CELL
            issue_text = _escape(issue.issue) if issue.issue else _EMPTY_CELL
            context = _escape(issue.highlighted_context) if issue.highlighted_context else _EMPTY_CELL
            lines.append(
                f"| {issue.filename} | {line} | {column} | `{issue.rule_id}` | {issue.issue_type.value} "
                f"| {issue_text} | {_escape(issue.message)} | {context} |"
            )

    return "\n".join(lines)


def build_report_csv(reports: Iterable["DocumentReport"]) -> list[list[str]]:
    """Convert the collected document reports into CSV data.

    Returns a list of rows, where each row is a list of string values.
    The first row contains the column headers.
    """

    rows: list[list[str]] = []

    rows.append([
        "Language",
        "Filename",
        "Line",
        "Column",
        "Rule ID",
        "Type",
        "Issue",
        "Message",
        "Highlighted Context",
    ])

    for report in _sorted_reports(reports):
        for issue in report.issues:
            rows.append([
                report.language,
                issue.filename,
                str(issue.line) if issue.line is not None else "",
                str(issue.column) if issue.column is not None else "",
                issue.rule_id,
                issue.issue_type.value,
                issue.issue,
                issue.message,
                issue.highlighted_context,
            ])

    return rows
