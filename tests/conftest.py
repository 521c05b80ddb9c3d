"""Shared fixtures for cchooks tests."""

from pathlib import Path

import pytest

from cchooks.models.hook import HookDefinition

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    """A home directory inside tmp_path, so discovery never reaches the real one."""
    home = tmp_path / "home"
    home.mkdir()
    return home


@pytest.fixture
def project_dir(home_dir: Path) -> Path:
    """Working directory two levels below home: home/work/app."""
    project = home_dir / "work" / "app"
    project.mkdir(parents=True)
    return project


@pytest.fixture
def edit_definition() -> HookDefinition:
    return HookDefinition.model_validate(
        {
            "tool_use": [
                {"matcher": "Edit", "hooks": [{"type": "command", "command": "x"}]},
            ]
        }
    )


@pytest.fixture
def read_fixture():
    def _read(name: str) -> str:
        return (FIXTURES_DIR / name).read_text(encoding="utf-8")

    return _read
