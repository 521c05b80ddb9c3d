"""Tests for upward .claude discovery."""

from pathlib import Path

from cchooks.operations.discovery import (
    LOCAL_SETTINGS_FILE,
    SHARED_SETTINGS_FILE,
    discover_claude_directories,
)


def test_claude_in_start_directory_short_circuits(home_dir: Path, project_dir: Path) -> None:
    (project_dir / ".claude").mkdir()
    (home_dir / "work" / ".claude").mkdir()

    result = discover_claude_directories(project_dir, home_dir)

    assert result.found
    assert result.is_current_directory
    assert result.root_path == project_dir
    assert result.searched == (project_dir,)
    assert result.candidates == (project_dir,)
    assert not result.settings_exists


def test_settings_file_existence_is_reported(home_dir: Path, project_dir: Path) -> None:
    (project_dir / ".claude").mkdir()
    (project_dir / ".claude" / LOCAL_SETTINGS_FILE).write_text("{}", encoding="utf-8")

    local = discover_claude_directories(project_dir, home_dir)
    shared = discover_claude_directories(project_dir, home_dir, SHARED_SETTINGS_FILE)

    assert local.settings_exists
    assert not shared.settings_exists


def test_nearest_parent_root_wins(home_dir: Path) -> None:
    start = home_dir / "a" / "b" / "c"
    start.mkdir(parents=True)
    (home_dir / "a" / "b" / ".claude").mkdir()
    (home_dir / "a" / ".claude").mkdir()
    (home_dir / "a" / ".claude" / LOCAL_SETTINGS_FILE).write_text("{}", encoding="utf-8")

    result = discover_claude_directories(start, home_dir)

    assert result.found
    assert not result.is_current_directory
    assert result.root_path == home_dir / "a" / "b"
    assert not result.settings_exists


def test_walk_continues_past_found_root_for_candidates(home_dir: Path) -> None:
    start = home_dir / "a" / "b" / "c"
    start.mkdir(parents=True)
    (home_dir / "a" / "b" / ".claude").mkdir()

    result = discover_claude_directories(start, home_dir)

    assert result.searched == (start, home_dir / "a" / "b", home_dir / "a")
    assert result.candidates == result.searched


def test_nothing_found_lists_candidates_nearest_first(home_dir: Path, project_dir: Path) -> None:
    result = discover_claude_directories(project_dir, home_dir)

    assert not result.found
    assert result.root_path is None
    assert result.candidates == (project_dir, home_dir / "work")


def test_home_directory_is_never_searched(home_dir: Path, project_dir: Path) -> None:
    (home_dir / ".claude").mkdir()

    result = discover_claude_directories(project_dir, home_dir)

    assert not result.found
    assert home_dir not in result.candidates
    assert home_dir not in result.searched


def test_start_at_home_searches_nothing(home_dir: Path) -> None:
    (home_dir / ".claude").mkdir()

    result = discover_claude_directories(home_dir, home_dir)

    assert not result.found
    assert result.candidates == ()
    assert result.searched == ()


def test_start_above_home_searches_nothing(tmp_path: Path, home_dir: Path) -> None:
    result = discover_claude_directories(tmp_path, home_dir)

    assert not result.found
    assert result.candidates == ()


def test_ancestors_of_home_are_never_searched(tmp_path: Path) -> None:
    """A sibling tree of home stops where it meets the home directory's ancestors."""
    start = tmp_path / "srv" / "app"
    start.mkdir(parents=True)
    (tmp_path / ".claude").mkdir()

    result = discover_claude_directories(start, tmp_path / "users" / "someone")

    assert not result.found
    assert result.searched == (start, tmp_path / "srv")


def test_claude_file_instead_of_directory_is_not_a_root(home_dir: Path, project_dir: Path) -> None:
    (project_dir / ".claude").write_text("not a directory", encoding="utf-8")

    result = discover_claude_directories(project_dir, home_dir)

    assert not result.found


def test_missing_start_directory_is_not_an_error(home_dir: Path) -> None:
    start = home_dir / "does" / "not" / "exist"

    result = discover_claude_directories(start, home_dir)

    assert not result.found
    assert result.candidates == (start, home_dir / "does" / "not", home_dir / "does")
