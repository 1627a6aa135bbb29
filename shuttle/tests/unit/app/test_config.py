from __future__ import annotations

import pytest

from shuttle.app.config import WindowConfig, parse_size


def test_defaults_match_demo_layout() -> None:
    config = WindowConfig()

    assert config.title == "Arrange Countries and Capitals"
    assert config.geometry == "500x450"
    assert (config.list_min_width, config.button_column_width) == (150, 50)
    assert (config.move_right_label, config.move_left_label) == (" > ", " < ")


def test_from_env_overrides_title_and_size() -> None:
    config = WindowConfig.from_env(
        {"SHUTTLE_WINDOW_TITLE": "Atlas", "SHUTTLE_WINDOW_SIZE": "640x480"}
    )

    assert config.title == "Atlas"
    assert config.geometry == "640x480"


def test_from_env_ignores_invalid_size(caplog) -> None:
    config = WindowConfig.from_env({"SHUTTLE_WINDOW_SIZE": "huge"})

    assert config.geometry == "500x450"
    assert "SHUTTLE_WINDOW_SIZE" in caplog.text


@pytest.mark.parametrize(
    "text,expected",
    [
        ("800x600", (800, 600)),
        (" 800 X 600 ", (800, 600)),
        ("0x600", None),
        ("800", None),
        ("", None),
    ],
)
def test_parse_size(text: str, expected) -> None:
    assert parse_size(text) == expected
