from __future__ import annotations

import logging
from unittest.mock import Mock

import pytest

from lyrics_picker.logging_setup import setup_logging


@pytest.fixture
def basic_config(monkeypatch):
    mock = Mock()
    monkeypatch.setattr(logging, "basicConfig", mock)
    monkeypatch.delenv("LYRICS_PICKER_LOG_LEVEL", raising=False)
    return mock


def test_default_is_warning_on_stderr(basic_config, tmp_path):
    assert setup_logging(False, debug_log_file=tmp_path / "debug.log") is None
    kwargs = basic_config.call_args.kwargs
    assert kwargs["level"] == logging.WARNING
    assert kwargs["filename"] is None


def test_debug_goes_to_debug_file(basic_config, tmp_path):
    target = tmp_path / "cfg" / "debug.log"
    assert setup_logging(True, debug_log_file=target) == target
    kwargs = basic_config.call_args.kwargs
    assert kwargs["level"] == logging.DEBUG
    assert kwargs["filename"] == str(target)
    assert target.parent.is_dir()


def test_explicit_log_file_wins(basic_config, tmp_path):
    explicit = tmp_path / "mine.log"
    assert setup_logging(True, explicit, debug_log_file=tmp_path / "debug.log") == explicit
    assert basic_config.call_args.kwargs["filename"] == str(explicit)


def test_env_overrides_level(basic_config, monkeypatch):
    monkeypatch.setenv("LYRICS_PICKER_LOG_LEVEL", "info")
    setup_logging(False)
    assert basic_config.call_args.kwargs["level"] == logging.INFO
