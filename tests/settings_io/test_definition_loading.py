"""Tests for hook definition files and the default definition."""

from pathlib import Path

import pytest

from cchooks.config import HooksConfig
from cchooks.definitions import DEFAULT_HOOK_DEFINITION, definition_label, resolve_definition
from cchooks.io.definition import load_hook_definition
from cchooks.models.hook import HookDefinition

VALID_YAML = """\
Stop:
  - matcher: ""
    hooks:
      - type: command
        command: notify-done --quiet
"""


def test_load_valid_definition(tmp_path: Path) -> None:
    path = tmp_path / "hooks.yaml"
    path.write_text(VALID_YAML, encoding="utf-8")

    definition = load_hook_definition(path)

    assert definition.events() == ["Stop"]
    assert definition.commands() == ["notify-done --quiet"]


def test_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "hooks.yaml"
    path.write_text("Stop: [unclosed\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid YAML"):
        load_hook_definition(path)


@pytest.mark.parametrize("content", ["", "- just\n- a list\n"])
def test_document_must_be_a_mapping(tmp_path: Path, content: str) -> None:
    path = tmp_path / "hooks.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError, match="must map event names"):
        load_hook_definition(path)


def test_schema_violation(tmp_path: Path) -> None:
    path = tmp_path / "hooks.yaml"
    path.write_text("Stop:\n  - matcher: 3\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid hook definition"):
        load_hook_definition(path)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_hook_definition(tmp_path / "absent.yaml")


def test_resolve_uses_default_without_path() -> None:
    assert resolve_definition(HooksConfig()) is DEFAULT_HOOK_DEFINITION


def test_resolve_loads_configured_file(tmp_path: Path) -> None:
    path = tmp_path / "hooks.yaml"
    path.write_text(VALID_YAML, encoding="utf-8")

    definition = resolve_definition(HooksConfig(definition_path=path))

    assert definition.events() == ["Stop"]


def test_default_definition_label() -> None:
    assert definition_label(DEFAULT_HOOK_DEFINITION) == "happy-coder-hooks"


def test_label_falls_back_for_blank_command() -> None:
    definition = HookDefinition.model_validate(
        {"Stop": [{"matcher": "", "hooks": [{"type": "command", "command": "  "}]}]}
    )

    assert definition_label(definition) == "hooks"
