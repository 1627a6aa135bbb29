from __future__ import annotations

import logging

import pytest

from shuttle.utils import logging as logging_utils


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("SHUTTLE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SHUTTLE_DEBUG", raising=False)
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_configure_root_uses_default_level() -> None:
    assert logging_utils.configure_root(logging.WARNING) == logging.WARNING
    assert logging.getLogger().level == logging.WARNING


def test_explicit_env_level_wins(monkeypatch) -> None:
    monkeypatch.setenv("SHUTTLE_LOG_LEVEL", "error")
    monkeypatch.setenv("SHUTTLE_DEBUG", "1")

    assert logging_utils.configure_root() == logging.ERROR


def test_debug_flag_forces_debug(monkeypatch) -> None:
    monkeypatch.setenv("SHUTTLE_DEBUG", "yes")

    assert logging_utils.configure_root("INFO") == logging.DEBUG


def test_numeric_and_unknown_levels(monkeypatch) -> None:
    monkeypatch.setenv("SHUTTLE_LOG_LEVEL", "30")
    assert logging_utils.configure_root() == logging.WARNING

    monkeypatch.setenv("SHUTTLE_LOG_LEVEL", "chatty")
    assert logging_utils.configure_root() == logging.INFO
