"""Tests for environment configuration."""

from pathlib import Path

import pytest

from cchooks.config import HooksConfig, load_config


def test_defaults_from_empty_environment() -> None:
    assert load_config({}) == HooksConfig()


def test_all_variables() -> None:
    config = load_config(
        {
            "CCHOOKS_DEBUG": "Yes",
            "CCHOOKS_DIFF_TOOL": "colordiff",
            "CCHOOKS_DEFINITION": "/etc/hooks.yaml",
            "CCHOOKS_SETTINGS_FILE": "settings.json",
        }
    )

    assert config == HooksConfig(
        debug=True,
        diff_tool="colordiff",
        definition_path=Path("/etc/hooks.yaml"),
        settings_file="settings.json",
    )


@pytest.mark.parametrize("value", ["", "0", "false", "no", "off", "maybe"])
def test_debug_falsy_values(value: str) -> None:
    assert load_config({"CCHOOKS_DEBUG": value}).debug is False


def test_blank_values_fall_back_to_defaults() -> None:
    config = load_config({"CCHOOKS_DIFF_TOOL": "  ", "CCHOOKS_SETTINGS_FILE": ""})

    assert config.diff_tool is None
    assert config.settings_file == "settings.local.json"


def test_unsupported_settings_file() -> None:
    with pytest.raises(ValueError, match="CCHOOKS_SETTINGS_FILE"):
        load_config({"CCHOOKS_SETTINGS_FILE": "../evil.json"})
