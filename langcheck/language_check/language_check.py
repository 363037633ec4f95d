"""Language quality checks for plain-text documents.

This module scans a folder of ``.txt``/``.md`` documents (or a single
document), runs the grammar rules of the selected language over each of
them, and writes a Markdown and a CSV report summarising the findings per
document.
"""

from __future__ import annotations

import argparse
import csv
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from langcheck.filters import WikipediaTextFilter
from langcheck.models import IssueType, LanguageIssue, RuleMatch
from langcheck.tagging import LexiconTagger

from .checker import LanguageChecker
from .checker_manager import CheckerManager
from .language_check_config import DEFAULT_DISABLED_RULES, DEFAULT_IGNORED_WORDS
from .languages import supported_languages
from .report_utils import build_report_csv, build_report_markdown
from .settings import CheckSettings

LOGGER = logging.getLogger(__name__)

# Characters of surrounding text kept on each side of a match
CONTEXT_RADIUS = 40
DOCUMENT_SUFFIXES = (".txt", ".md")
WIKI_SUFFIXES = (".wiki",)
NO_CONTEXT = "ERROR FETCHING CONTEXT"


@dataclass
class DocumentReport:
    """Compilation of issues for a specific document."""

    path: Path
    language: str
    issues: list[LanguageIssue]


def _offset_to_position(text: str, offset: int) -> tuple[int, int]:
    """Return a 1-based (line, column) tuple for the character offset."""
    line = text.count("\n", 0, offset) + 1
    last_newline = text.rfind("\n", 0, offset)
    if last_newline == -1:
        column = offset + 1
    else:
        column = offset - last_newline
    return line, column


def _context_window(text: str, from_pos: int, to_pos: int) -> tuple[str, int]:
    """Return the text around a match and the match offset inside it.

    Line breaks become spaces so that the offset stays valid.
    """
    start = max(0, from_pos - CONTEXT_RADIUS)
    end = min(len(text), to_pos + CONTEXT_RADIUS)
    context = text[start:end].replace("\r", " ").replace("\n", " ")
    return context, from_pos - start


def _highlight_context(context: str, context_offset: int, error_length: int) -> str:
    if not context:
        return ""
    start = max(0, min(len(context), context_offset))
    end = max(start, min(len(context), start + max(error_length, 1)))
    return f"{context[:start]}**{context[start:end]}**{context[end:]}"


def _is_ignored(covered_text: str, words_to_ignore: set[str]) -> bool:
    original_text = covered_text.strip()
    if not original_text:
        return False
    letters = "".join(ch for ch in original_text if ch.isalpha())
    # "PDFs" is ignored when "PDF" is
    if letters and (letters.isupper() or letters.rstrip("s").isupper()):
        return letters in words_to_ignore or letters.rstrip("s") in words_to_ignore
    return original_text in words_to_ignore


def _filter_matches(
    matches: list[RuleMatch], text: str, words_to_ignore: set[str]
) -> list[RuleMatch]:
    """Filter matches whose covered text is configured to be ignored."""

    if not words_to_ignore:
        return list(matches)
    return [
        match
        for match in matches
        if not _is_ignored(text[match.from_pos : match.to_pos], words_to_ignore)
    ]


def _collect_disabled_rules(additional_rules: set[str] | None) -> set[str]:
    """Merge default disabled rules with any additional entries."""
    rules = set(DEFAULT_DISABLED_RULES)
    if additional_rules:
        rules.update(additional_rules)
    return rules


def _make_issue(match: RuleMatch, filename: str, text: str) -> LanguageIssue:
    context, context_offset = _context_window(text, match.from_pos, match.to_pos)
    highlighted_context = _highlight_context(context, context_offset, match.length)
    if not highlighted_context.strip():
        LOGGER.warning(
            "No context available for %s (rule=%s) at offset %d",
            filename,
            match.rule_id,
            match.from_pos,
        )
        context = highlighted_context = NO_CONTEXT
    line, column = _offset_to_position(text, match.from_pos)
    return LanguageIssue(
        filename=filename,
        rule_id=match.rule_id,
        message=match.message,
        issue_type=IssueType.GRAMMAR,
        context=context,
        highlighted_context=highlighted_context,
        issue=text[match.from_pos : match.to_pos],
        offset=match.from_pos,
        line=line,
        column=column,
    )


def _failure_issue(filename: str, rule_id: str, issue_type: IssueType, message: str) -> LanguageIssue:
    return LanguageIssue(
        filename=filename,
        rule_id=rule_id,
        message=message,
        issue_type=issue_type,
        context=NO_CONTEXT,
        highlighted_context=NO_CONTEXT,
    )


def check_document(
    document_path: Path,
    checker: LanguageChecker | list[LanguageChecker],
    *,
    ignored_words: set[str] | None = None,
    text_filter: WikipediaTextFilter | None = None,
    max_workers: int = 1,
) -> DocumentReport:
    """Run language checks on a single document.

    Args:
            document_path: Path to the UTF-8 text document
            checker: LanguageChecker instance or list of instances. When a list
                  is provided, all checkers are run and results are merged
            ignored_words: Words whose matches are dropped (case-sensitive).
                  ``None`` means the default ignored words
            text_filter: Optional markup filter; positions then refer to the
                  filtered text
            max_workers: Threads used per checker to check sentences
    """

    filename = document_path.name
    checkers = [checker] if not isinstance(checker, list) else checker
    language_label = ",".join(item.language for item in checkers)

    try:
        text = document_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.exception("Could not read %s", document_path)
        return DocumentReport(
            path=document_path,
            language=language_label,
            issues=[
                _failure_issue(
                    filename, "CHECK_FAILURE", IssueType.ERROR, f"Could not read document: {exc}"
                )
            ],
        )

    if text_filter is not None:
        text = text_filter.filter(text).plain_text

    words_to_ignore = (
        set(DEFAULT_IGNORED_WORDS) if ignored_words is None else set(ignored_words)
    )

    matches: list[RuleMatch] = []
    failure_records: list[tuple[str, Exception]] = []
    successful_check = False

    for checker_instance in checkers:
        try:
            matches.extend(checker_instance.check(text, max_workers=max_workers))
            successful_check = True
        except Exception as exc:
            LOGGER.exception(
                "Language check failed for %s (language: %s)",
                document_path,
                checker_instance.language,
            )
            failure_records.append((checker_instance.language, exc))

    if not successful_check and failure_records:
        issues = [
            _failure_issue(
                filename,
                "CHECK_FAILURE",
                IssueType.ERROR,
                f"Language check failed for language '{language}' due to error: {exc}",
            )
            for language, exc in failure_records
        ]
        return DocumentReport(path=document_path, language=language_label, issues=issues)

    matches.sort(key=lambda match: (match.from_pos, match.to_pos))
    issues = [
        _make_issue(match, filename, text)
        for match in _filter_matches(matches, text, words_to_ignore)
    ]

    for language, exc in failure_records:
        issues.append(
            _failure_issue(
                filename,
                "CHECK_PARTIAL_FAILURE",
                IssueType.WARNING,
                f"Language check for language '{language}' experienced a runtime error: {exc}",
            )
        )

    return DocumentReport(path=document_path, language=language_label, issues=issues)


def iter_documents(root: Path, suffixes: Iterable[str] = DOCUMENT_SUFFIXES) -> list[Path]:
    """Return the sorted list of documents under ``root`` with one of ``suffixes``."""

    if not root.is_dir():
        return []
    wanted = {suffix.lower() for suffix in suffixes}
    return sorted(
        (path for path in root.rglob("*") if path.is_file() and path.suffix.lower() in wanted),
        key=lambda path: str(path).lower(),
    )


def build_checker(
    language: str,
    *,
    disabled_rules: set[str] | None = None,
    lexicon: Path | None = None,
    single_line_breaks: bool = False,
) -> LanguageChecker:
    """Instantiate a LanguageChecker for the requested language."""
    tagger = LexiconTagger.from_file(lexicon) if lexicon is not None else None
    manager = CheckerManager(
        disabled_rules=_collect_disabled_rules(disabled_rules),
        tagger=tagger,
        single_line_breaks_marks_paragraph=single_line_breaks,
        logger=LOGGER,
    )
    return manager.build_checker(language)


def _check_with_logging(
    document_path: Path,
    checker: LanguageChecker,
    ignored_words: set[str] | None,
    text_filter: WikipediaTextFilter | None,
) -> DocumentReport:
    LOGGER.info("Checking %s", document_path.name)
    report = check_document(
        document_path, checker, ignored_words=ignored_words, text_filter=text_filter
    )
    LOGGER.info("Completed %s: %d issue(s)", document_path.name, len(report.issues))
    return report


def run_language_checks(
    root: Path,
    *,
    report_path: Optional[Path] = None,
    language: str = "ca",
    document: Path | None = None,
    checker: LanguageChecker | None = None,
    disabled_rules: set[str] | None = None,
    ignored_words: set[str] | None = None,
    lexicon: Path | None = None,
    single_line_breaks: bool = False,
    max_workers: int = 1,
    wiki: bool = False,
) -> Path:
    """Run language checks across all documents and write the reports.

    Args:
            root: Folder searched recursively for documents
            report_path: Path to write the Markdown report; the CSV report is
                  written next to it (default: <root>/language-check-report.md)
            language: Language code used when ``checker`` is not given
            document: Single document to check (relative to root unless absolute)
            checker: Pre-configured LanguageChecker (optional)
            disabled_rules: Rule IDs to disable in addition to the defaults
            ignored_words: Words to ignore; ``None`` means the defaults
            lexicon: Tab separated lexicon for the tagger
            single_line_breaks: Treat every line break as a paragraph end
            max_workers: Documents checked in parallel
            wiki: Documents are MediaWiki markup and are filtered first
    """

    if document is not None:
        document_path = document if document.is_absolute() else (root / document)
        document_path = document_path.resolve()
        if not document_path.is_file():
            raise FileNotFoundError(f"Document not found: {document_path}")
        documents = [document_path]
    else:
        if not root.is_dir():
            raise FileNotFoundError(f"Root folder not found: {root}")
        suffixes = DOCUMENT_SUFFIXES + WIKI_SUFFIXES if wiki else DOCUMENT_SUFFIXES
        documents = iter_documents(root, suffixes)

    if not documents:
        LOGGER.info("No documents found under %s", root)

    if checker is None:
        checker = build_checker(
            language,
            disabled_rules=disabled_rules,
            lexicon=lexicon,
            single_line_breaks=single_line_breaks,
        )
    text_filter = WikipediaTextFilter() if wiki else None

    if max_workers > 1 and len(documents) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            reports = list(
                executor.map(
                    lambda path: _check_with_logging(path, checker, ignored_words, text_filter),
                    documents,
                )
            )
    else:
        reports = [
            _check_with_logging(path, checker, ignored_words, text_filter) for path in documents
        ]

    LOGGER.info(
        "Checked %d document(s): %d issue(s) in total",
        len(reports),
        sum(len(report.issues) for report in reports),
    )

    if report_path is None:
        report_path = root / "language-check-report.md"

    # Write Markdown report
    report_markdown = build_report_markdown(reports)
    report_path.parent.mkdir(parents=True, exist_ok=True)
    report_path.write_text(report_markdown, encoding="utf-8")

    # Write CSV report
    csv_path = report_path.with_suffix(".csv")
    csv_rows = build_report_csv(reports)
    with csv_path.open("w", encoding="utf-8", newline="") as csv_file:
        writer = csv.writer(csv_file)
        writer.writerows(csv_rows)

    return report_path


def parse_args(
    argv: Optional[Iterable[str]] = None, settings: CheckSettings | None = None
) -> argparse.Namespace:
    settings = settings or CheckSettings.from_env()
    parser = argparse.ArgumentParser(
        description="Run rule-based grammar checks on plain-text documents."
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=Path("Documents"),
        help="Folder searched recursively for .txt/.md documents (default: Documents)",
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Path to write the Markdown report (default: <root>/language-check-report.md)",
    )
    parser.add_argument(
        "--language",
        default=settings.language,
        help=f"Language to check, one of {', '.join(supported_languages())} "
        f"(default: {settings.language})",
    )
    parser.add_argument(
        "--document",
        type=Path,
        default=None,
        help="Single document to check (relative to root unless absolute).",
    )
    parser.add_argument(
        "--lexicon",
        type=Path,
        default=settings.lexicon,
        help="Tab separated word/lemma/tag lexicon used for tagging.",
    )
    parser.add_argument(
        "--ignore-word",
        action="append",
        dest="ignored_words",
        help="Ignore matches on this word (case-sensitive, can be specified multiple times).",
    )
    parser.add_argument(
        "--no-default-words",
        action="store_true",
        help="Don't apply default ignored words (only use words specified with --ignore-word)",
    )
    parser.add_argument(
        "--single-line-breaks",
        action=argparse.BooleanOptionalAction,
        default=settings.single_line_breaks,
        help="Treat every line break as the end of a paragraph (--no-single-line-breaks to turn off).",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=settings.max_workers,
        help=f"Documents checked in parallel (default: {settings.max_workers})",
    )
    parser.add_argument(
        "--wiki",
        action="store_true",
        help="Documents are MediaWiki markup; extract the plain text before checking.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    return parser.parse_args(list(argv) if argv is not None else None)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    ignored_words: set[str]
    if args.no_default_words:
        ignored_words = set(args.ignored_words or [])
    elif args.ignored_words:
        ignored_words = set(DEFAULT_IGNORED_WORDS) | set(args.ignored_words)
    else:
        ignored_words = set(DEFAULT_IGNORED_WORDS)

    try:
        report_path = run_language_checks(
            args.root,
            report_path=args.report,
            language=args.language,
            document=args.document,
            ignored_words=ignored_words,
            lexicon=args.lexicon,
            single_line_breaks=args.single_line_breaks,
            max_workers=max(1, args.workers),
            wiki=args.wiki,
        )
    except (FileNotFoundError, ValueError) as exc:
        LOGGER.error("%s", exc)
        return 1
    csv_path = report_path.with_suffix(".csv")
    print(f"Language check report written to {report_path.resolve()}")
    print(f"CSV report written to {csv_path.resolve()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
