# tests/test_logging_setup.py
"""
Logging defaults and the engine's module loggers.
"""

from __future__ import annotations

import json
import logging

import pytest

import prakriya.config
from prakriya.args import Dhatu, Lakara, TinantaArgs
from prakriya.ashtadhyayi import Ashtadhyayi
from prakriya.config import LogFormat, Settings
from utils import logging_setup
from utils.logging_setup import get_logger, init_logging


@pytest.fixture
def restore_logging():
    """Put the quiet test configuration back, whatever the test changed."""
    yield
    init_logging(logging.WARNING, force=True)


def test_level_comes_from_settings(restore_logging, monkeypatch) -> None:
    monkeypatch.setattr(prakriya.config.settings, "LOG_LEVEL", "DEBUG")
    init_logging(force=True)
    assert logging.getLogger().level == logging.DEBUG


def test_explicit_level_wins_over_settings(restore_logging, monkeypatch) -> None:
    monkeypatch.setattr(prakriya.config.settings, "LOG_LEVEL", "DEBUG")
    init_logging("ERROR", force=True)
    assert logging.getLogger().level == logging.ERROR


def test_dotenv_file_configures_logging(restore_logging, tmp_path, monkeypatch, capsys) -> None:
    (tmp_path / ".env").write_text("PRAKRIYA_LOG_LEVEL=DEBUG\nPRAKRIYA_LOG_FORMAT=json\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PRAKRIYA_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PRAKRIYA_LOG_FORMAT", raising=False)

    loaded = Settings()
    assert loaded.LOG_LEVEL == "DEBUG"
    assert loaded.LOG_FORMAT == LogFormat.JSON
    monkeypatch.setattr(prakriya.config, "settings", loaded)

    init_logging(force=True)
    assert logging.getLogger().level == logging.DEBUG

    get_logger("tests").debug("settings_applied", source="dotenv")
    line = capsys.readouterr().err.strip().splitlines()[-1]
    event = json.loads(line)
    assert event["event"] == "settings_applied"
    assert event["source"] == "dotenv"


def test_engine_modules_initialize_logging(restore_logging, monkeypatch) -> None:
    monkeypatch.setattr(logging_setup, "_INITIALIZED", False)
    get_logger("prakriya.core")
    assert logging_setup._INITIALIZED


def test_library_use_is_quiet_by_default(restore_logging, monkeypatch, capsys) -> None:
    monkeypatch.setattr(prakriya.config.settings, "LOG_LEVEL", "INFO")
    init_logging(force=True)

    results = Ashtadhyayi().derive_tinantas(Dhatu(upadesha="BU", gana=1), TinantaArgs(lakara=Lakara.LAT))
    assert [p.text() for p in results] == ["Bavati"]

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "derivation_started" not in captured.err
