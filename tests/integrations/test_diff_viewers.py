"""Tests for the diff display implementations."""

from pathlib import Path

from cchooks.integrations.diff import (
    FALLBACK_DIFF_TOOL,
    PREFERRED_DIFF_TOOL,
    FakeDiffViewer,
    SubprocessDiffViewer,
    diff_command,
)


def test_plain_diff_gets_unified_flag() -> None:
    assert diff_command("diff", Path("a"), Path("b")) == ["diff", "-u", "a", "b"]
    assert diff_command("/usr/bin/diff", Path("a"), Path("b")) == ["/usr/bin/diff", "-u", "a", "b"]


def test_other_tools_get_bare_paths() -> None:
    assert diff_command("difft", Path("a"), Path("b")) == ["difft", "a", "b"]


def test_fake_find_tool() -> None:
    assert FakeDiffViewer().find_tool() == FALLBACK_DIFF_TOOL
    assert FakeDiffViewer(preferred_installed=True).find_tool() == PREFERRED_DIFF_TOOL


def test_fake_records_file_contents(tmp_path: Path) -> None:
    original = tmp_path / "original.json"
    proposed = tmp_path / "proposed.json"
    original.write_text("{}", encoding="utf-8")
    proposed.write_text('{"a": 1}', encoding="utf-8")
    viewer = FakeDiffViewer(tool_runs=False)

    assert viewer.show_diff("diff", original, proposed) is False

    [call] = viewer.calls
    assert call.tool == "diff"
    assert call.original_content == "{}"
    assert call.proposed_content == '{"a": 1}'


def test_missing_tool_reports_failure(tmp_path: Path) -> None:
    original = tmp_path / "a.json"
    original.write_text("{}", encoding="utf-8")

    ran = SubprocessDiffViewer().show_diff(
        str(tmp_path / "no-such-diff-tool"), original, original
    )

    assert ran is False
