from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from langcheck.language_check.settings import (
    ENV_LANGUAGE,
    ENV_LEXICON,
    ENV_MAX_WORKERS,
    ENV_SINGLE_LINE_BREAKS,
    CheckSettings,
)

ALL_VARS = (ENV_LANGUAGE, ENV_LEXICON, ENV_MAX_WORKERS, ENV_SINGLE_LINE_BREAKS)


def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so that monkeypatch restores the variables afterwards
    for name in ALL_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_defaults_from_empty_environment() -> None:
    settings = CheckSettings.from_env(environ={})
    assert settings == CheckSettings()
    assert settings.language == "ca"
    assert settings.single_line_breaks is False
    assert settings.max_workers == 1
    assert settings.lexicon is None


def test_values_from_environment() -> None:
    settings = CheckSettings.from_env(
        environ={
            ENV_LANGUAGE: "ru",
            ENV_SINGLE_LINE_BREAKS: "yes",
            ENV_MAX_WORKERS: "4",
            ENV_LEXICON: "data/lexicon.tsv",
        }
    )
    assert settings.language == "ru"
    assert settings.single_line_breaks is True
    assert settings.max_workers == 4
    assert settings.lexicon == Path("data/lexicon.tsv")


@pytest.mark.parametrize(
    ("name", "value"),
    [
        (ENV_MAX_WORKERS, "many"),
        (ENV_MAX_WORKERS, "0"),
        (ENV_SINGLE_LINE_BREAKS, "perhaps"),
    ],
)
def test_invalid_values_fall_back_to_defaults(
    name: str, value: str, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING):
        settings = CheckSettings.from_env(environ={name: value})
    assert settings == CheckSettings()
    assert name in caplog.text


def test_dotenv_file_is_loaded(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    dotenv = tmp_path / ".env"
    dotenv.write_text(f"{ENV_LANGUAGE}=en\n{ENV_MAX_WORKERS}=3\n", encoding="utf-8")

    settings = CheckSettings.from_env(dotenv_path=dotenv)

    assert settings.language == "en"
    assert settings.max_workers == 3


def test_process_environment_wins_over_dotenv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv(ENV_LANGUAGE, "ru")
    dotenv = tmp_path / ".env"
    dotenv.write_text(f"{ENV_LANGUAGE}=en\n", encoding="utf-8")

    assert CheckSettings.from_env(dotenv_path=dotenv).language == "ru"
