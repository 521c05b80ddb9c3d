"""Tests for the install command."""

import json
from pathlib import Path

from click.testing import CliRunner

from cchooks.cli import cli
from cchooks.commands.install import install_hooks
from cchooks.config import HooksConfig
from cchooks.context import HooksContext
from cchooks.definitions import DEFAULT_HOOK_DEFINITION
from cchooks.integrations.prompt import FakePrompter
from cchooks.operations.decision import CANCEL_VALUE
from cchooks.output import RecordingFeedback


def test_fresh_install_in_current_directory(home_dir: Path, project_dir: Path) -> None:
    """Nothing found up to home; choosing the current directory creates the file."""
    prompter = FakePrompter(select_answers=[str(project_dir)])
    ctx = HooksContext.for_test(prompter=prompter, cwd=project_dir, home=home_dir)

    result = CliRunner().invoke(cli, ["install"], obj=ctx)

    assert result.exit_code == 0, result.output
    settings_path = project_dir / ".claude" / "settings.local.json"
    assert json.loads(settings_path.read_text(encoding="utf-8")) == {
        "hooks": DEFAULT_HOOK_DEFINITION.to_settings()
    }
    _, choices, default_index = prompter.select_calls[0]
    assert [c.value for c in choices] == [str(project_dir), str(home_dir / "work"), CANCEL_VALUE]
    assert default_index == 2


def test_cancel_makes_no_changes(home_dir: Path, project_dir: Path) -> None:
    prompter = FakePrompter(select_answers=[CANCEL_VALUE])
    ctx = HooksContext.for_test(prompter=prompter, cwd=project_dir, home=home_dir)

    result = install_hooks(ctx)

    assert result is None
    assert not (project_dir / ".claude").exists()
    assert not (home_dir / "work" / ".claude").exists()


def test_existing_claude_directory_is_used_without_prompting(
    home_dir: Path, project_dir: Path
) -> None:
    (project_dir / ".claude").mkdir()
    prompter = FakePrompter()
    feedback = RecordingFeedback()
    ctx = HooksContext.for_test(
        prompter=prompter, feedback=feedback, cwd=project_dir, home=home_dir
    )

    result = install_hooks(ctx)

    assert result is not None
    assert result.created_new_file
    assert not result.created_new_directory
    assert prompter.confirm_calls == []
    assert prompter.select_calls == []
    assert "Installation complete!" in feedback.text


def test_parent_directory_accepted(home_dir: Path, project_dir: Path) -> None:
    parent = home_dir / "work"
    (parent / ".claude").mkdir()
    ctx = HooksContext.for_test(
        prompter=FakePrompter(confirm_answers=[True]), cwd=project_dir, home=home_dir
    )

    result = install_hooks(ctx)

    assert result is not None
    assert result.settings_path == parent / ".claude" / "settings.local.json"
    assert not (project_dir / ".claude").exists()


def test_shared_settings_file_from_config(home_dir: Path, project_dir: Path) -> None:
    (project_dir / ".claude").mkdir()
    ctx = HooksContext.for_test(
        config=HooksConfig(settings_file="settings.json"), cwd=project_dir, home=home_dir
    )

    install_hooks(ctx)

    assert (project_dir / ".claude" / "settings.json").exists()
    assert not (project_dir / ".claude" / "settings.local.json").exists()


def test_io_error_exits_with_message(home_dir: Path, project_dir: Path) -> None:
    (project_dir / ".claude" / "settings.local.json").mkdir(parents=True)
    ctx = HooksContext.for_test(cwd=project_dir, home=home_dir)

    result = CliRunner().invoke(cli, ["install"], obj=ctx)

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_io_error_reraised_in_debug_mode(home_dir: Path, project_dir: Path) -> None:
    (project_dir / ".claude" / "settings.local.json").mkdir(parents=True)
    ctx = HooksContext.for_test(config=HooksConfig(debug=True), cwd=project_dir, home=home_dir)

    result = CliRunner().invoke(cli, ["install"], obj=ctx)

    assert result.exit_code == 1
    assert isinstance(result.exception, OSError)
