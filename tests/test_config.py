"""Tests for environment-driven settings."""

import logging
from pathlib import Path

import pytest

from studyboard.config import Settings


def test_defaults(tmp_path: Path) -> None:
    settings = Settings.from_env({}, token_file=tmp_path / "token.txt")

    assert settings == Settings()
    assert settings.timezone == "Europe/Rome"
    assert settings.report_hour == 22


def test_reads_environment(tmp_path: Path) -> None:
    env = {
        "TELEGRAM_BOT_TOKEN": "123:abc",
        "TELEGRAM_CHAT_ID": "42",
        "GEMINI_API_KEY": "gem",
        "STUDYBOARD_TIMEZONE": "UTC",
        "STUDYBOARD_REPORT_HOUR": "21",
        "STUDYBOARD_LOG_LEVEL": "debug",
    }

    settings = Settings.from_env(env, token_file=tmp_path / "token.txt")

    assert settings.telegram_token == "123:abc"
    assert settings.telegram_chat_id == "42"
    assert settings.gemini_api_key == "gem"
    assert settings.timezone == "UTC"
    assert settings.report_hour == 21
    assert settings.log_level == "DEBUG"


def test_api_key_alias(tmp_path: Path) -> None:
    settings = Settings.from_env({"API_KEY": "alt"}, token_file=tmp_path / "token.txt")

    assert settings.gemini_api_key == "alt"


def test_token_file_fallback(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    token_file = tmp_path / "token.txt"
    token_file.write_text("999:file\n", encoding="utf-8")

    with caplog.at_level(logging.INFO):
        settings = Settings.from_env({}, token_file=token_file)

    assert settings.telegram_token == "999:file"
    assert f"Token caricato da {token_file}." in caplog.text


def test_bad_integer_falls_back(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        settings = Settings.from_env({"STUDYBOARD_REPORT_HOUR": "sera"},
                                     token_file=tmp_path / "token.txt")

    assert settings.report_hour == 22
    assert "STUDYBOARD_REPORT_HOUR" in caplog.text
