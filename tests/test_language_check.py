from __future__ import annotations

import csv
import logging
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from langcheck.language_check import (
    CheckerManager,
    LanguageChecker,
    check_document,
    get_language,
    run_language_checks,
)
from langcheck.language_check.language_check import main, parse_args
from langcheck.language_check.settings import CheckSettings
from langcheck.models import IssueType
from langcheck.tagging import LexiconTagger

FIXTURES = Path(__file__).resolve().parent / "fixtures"
LEXICON = FIXTURES / "lexicon_ca.tsv"
RULE_ID = "CONCORDANCES_ADJECTIU_POSPOSAT"
TEXT = "La casa blanca.\nLes cases blanc."


class ExplodingChecker:
    language = "ca"

    def check(self, text: str, *, max_workers: int = 1):
        raise RuntimeError("boom")


@pytest.fixture
def manager() -> CheckerManager:
    return CheckerManager(tagger=LexiconTagger.from_file(LEXICON))


@pytest.fixture
def checker(manager: CheckerManager) -> LanguageChecker:
    return manager.build_checker("ca")


def test_checker_returns_document_offsets(checker: LanguageChecker) -> None:
    text = "La casa blanca. Les cases blanc."
    matches = checker.check(text)

    assert len(matches) == 1
    assert matches[0].rule_id == RULE_ID
    assert text[matches[0].from_pos : matches[0].to_pos] == "blanc"
    assert matches[0].from_pos == 26


def test_parallel_check_keeps_document_order(checker: LanguageChecker) -> None:
    text = "Les cases blanc. La casa blanca. Les cases blanc. Els pis blanques."
    sequential = checker.check(text)
    parallel = checker.check(text, max_workers=4)

    assert parallel == sequential
    assert [text[m.from_pos : m.to_pos] for m in parallel] == ["blanc", "blanc", "blanques"]


def test_analyze_text_offsets(checker: LanguageChecker) -> None:
    analysed = checker.analyze_text("La casa blanca. Les cases blanc.")
    assert [offset for offset, _ in analysed] == [0, 16]
    assert analysed[1][1].text == "Les cases blanc."


def test_disabled_rules_are_not_run() -> None:
    manager = CheckerManager(tagger=LexiconTagger.from_file(LEXICON), disabled_rules={RULE_ID})
    checker = manager.build_checker("ca")
    assert checker.enabled_rules == []
    assert checker.check("Les cases blanc.") == []


def test_manager_builds_registered_languages(manager: CheckerManager) -> None:
    checkers = manager.build_checkers(["ca", "ru", "en"])
    assert [c.language for c in checkers] == ["ca", "ru", "en"]
    assert [rule.rule_id for rule in checkers[0].rules] == [RULE_ID]
    assert checkers[1].rules == []
    assert "млрд" in checkers[1].sentence_tokenizer.abbreviations
    assert get_language("ca-ES").code == "ca"


def test_manager_rejects_unknown_language(manager: CheckerManager) -> None:
    with pytest.raises(ValueError):
        manager.build_checker("xx")


def test_check_document_builds_issues(tmp_path: Path, checker: LanguageChecker) -> None:
    document = tmp_path / "doc.txt"
    document.write_text(TEXT, encoding="utf-8")

    report = check_document(document, checker)

    assert report.path == document
    assert report.language == "ca"
    assert len(report.issues) == 1
    issue = report.issues[0]
    assert issue.filename == "doc.txt"
    assert issue.rule_id == RULE_ID
    assert issue.issue == "blanc"
    assert issue.issue_type is IssueType.GRAMMAR
    assert (issue.offset, issue.line, issue.column) == (26, 2, 11)
    assert issue.highlighted_context == "La casa blanca. Les cases **blanc**."


def test_check_document_filters_ignored_words(tmp_path: Path, checker: LanguageChecker) -> None:
    document = tmp_path / "doc.txt"
    document.write_text(TEXT, encoding="utf-8")

    report = check_document(document, checker, ignored_words={"blanc"})

    assert report.issues == []


def test_check_document_records_failures(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    document = tmp_path / "doc.txt"
    document.write_text(TEXT, encoding="utf-8")

    with caplog.at_level(logging.ERROR):
        report = check_document(document, ExplodingChecker())  # type: ignore[arg-type]

    assert len(report.issues) == 1
    issue = report.issues[0]
    assert issue.rule_id == "CHECK_FAILURE"
    assert issue.issue_type is IssueType.ERROR
    assert "boom" in issue.message
    assert "Language check failed" in caplog.text


def test_check_document_records_partial_failures(tmp_path: Path, checker: LanguageChecker) -> None:
    document = tmp_path / "doc.txt"
    document.write_text(TEXT, encoding="utf-8")

    report = check_document(document, [checker, ExplodingChecker()])  # type: ignore[list-item]

    assert [issue.rule_id for issue in report.issues] == [RULE_ID, "CHECK_PARTIAL_FAILURE"]
    assert report.issues[1].issue_type is IssueType.WARNING
    assert report.language == "ca,ca"


def test_run_language_checks_writes_reports(tmp_path: Path, checker: LanguageChecker) -> None:
    root = tmp_path / "docs"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_text(TEXT, encoding="utf-8")
    (root / "b.md").write_text("La casa blanca.", encoding="utf-8")
    (root / "sub" / "c.txt").write_text("Les cases blanc.", encoding="utf-8")
    (root / "notes.rst").write_text("Les cases blanc.", encoding="utf-8")
    report_path = tmp_path / "out" / "report.md"

    result = run_language_checks(root, report_path=report_path, checker=checker, max_workers=2)

    assert result == report_path
    markdown = report_path.read_text(encoding="utf-8")
    assert "# Language Check Report" in markdown
    assert "- Checked 3 document(s)" in markdown
    assert "- Total issues found: 2" in markdown
    assert "notes.rst" not in markdown
    assert "_No issues found._" in markdown

    with report_path.with_suffix(".csv").open("r", encoding="utf-8", newline="") as handle:
        rows = list(csv.reader(handle))
    assert rows[0] == [
        "Language",
        "Filename",
        "Line",
        "Column",
        "Rule ID",
        "Type",
        "Issue",
        "Message",
        "Highlighted Context",
    ]
    assert len(rows) == 3
    assert rows[1][:7] == ["ca", "a.txt", "2", "11", RULE_ID, "grammar", "blanc"]
    assert rows[1][7] == "L'adjectiu «blanc» no concorda apropiadament."
    assert rows[2][1] == "c.txt"


def test_run_language_checks_single_document(tmp_path: Path, checker: LanguageChecker) -> None:
    (tmp_path / "one.txt").write_text("Les cases blanc.", encoding="utf-8")
    (tmp_path / "two.txt").write_text("Les cases blanc.", encoding="utf-8")

    report_path = run_language_checks(tmp_path, document=Path("one.txt"), checker=checker)

    assert report_path == tmp_path / "language-check-report.md"
    markdown = report_path.read_text(encoding="utf-8")
    assert "one.txt" in markdown
    assert "two.txt" not in markdown


def test_run_language_checks_filters_wiki_markup(tmp_path: Path, checker: LanguageChecker) -> None:
    (tmp_path / "page.wiki").write_text(
        "[[Fitxer:foto.jpg|miniatura]] Les [[cases]] blanc.<ref>font</ref>", encoding="utf-8"
    )

    report_path = run_language_checks(tmp_path, checker=checker, wiki=True)

    with report_path.with_suffix(".csv").open("r", encoding="utf-8", newline="") as handle:
        rows = list(csv.reader(handle))
    assert len(rows) == 2
    assert rows[1][1] == "page.wiki"
    assert rows[1][-1] == "Les cases **blanc**."


def test_run_language_checks_missing_input(tmp_path: Path, checker: LanguageChecker) -> None:
    with pytest.raises(FileNotFoundError):
        run_language_checks(tmp_path, document=Path("missing.txt"), checker=checker)
    with pytest.raises(FileNotFoundError):
        run_language_checks(tmp_path / "nowhere", checker=checker)


def test_main_writes_reports(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "doc.txt").write_text(TEXT, encoding="utf-8")
    report_path = tmp_path / "report.md"

    exit_code = main(
        [
            "--root",
            str(tmp_path),
            "--report",
            str(report_path),
            "--language",
            "ca",
            "--lexicon",
            str(LEXICON),
            "--workers",
            "2",
        ]
    )

    assert exit_code == 0
    assert report_path.is_file()
    assert report_path.with_suffix(".csv").is_file()
    assert "blanc" in report_path.read_text(encoding="utf-8")
    assert "Language check report written to" in capsys.readouterr().out


def test_main_ignore_word(tmp_path: Path) -> None:
    (tmp_path / "doc.txt").write_text(TEXT, encoding="utf-8")
    report_path = tmp_path / "report.md"

    exit_code = main(
        [
            "--root",
            str(tmp_path),
            "--report",
            str(report_path),
            "--language",
            "ca",
            "--lexicon",
            str(LEXICON),
            "--no-default-words",
            "--ignore-word",
            "blanc",
        ]
    )

    assert exit_code == 0
    assert "- Total issues found: 0" in report_path.read_text(encoding="utf-8")


def test_main_missing_document_returns_error(tmp_path: Path) -> None:
    assert main(["--root", str(tmp_path), "--document", "missing.txt", "--language", "ca"]) == 1


def test_main_unknown_language_returns_error(tmp_path: Path) -> None:
    assert main(["--root", str(tmp_path), "--language", "xx"]) == 1


def test_single_line_breaks_flag_overrides_settings() -> None:
    enabled = CheckSettings(single_line_breaks=True)
    disabled = CheckSettings(single_line_breaks=False)

    assert parse_args([], settings=enabled).single_line_breaks is True
    assert parse_args(["--no-single-line-breaks"], settings=enabled).single_line_breaks is False
    assert parse_args([], settings=disabled).single_line_breaks is False
    assert parse_args(["--single-line-breaks"], settings=disabled).single_line_breaks is True
