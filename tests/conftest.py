from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from uw.manager import WorkspaceManager  # noqa: E402
from uw.models import Workspace  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep the user's config and shell profile out of every test."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in ("UW_CONFIG_PATH", "UW_PROFILE", "UW_LOG_LEVEL", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
    return home


@pytest.fixture
def workspace(tmp_path: Path) -> Workspace:
    """A freshly scaffolded workspace."""
    return WorkspaceManager().init(tmp_path / "ws")


@pytest.fixture
def write_script(workspace: Workspace):
    """Replace a workspace script with the given Python body."""

    def _write(name: str, body: str) -> Path:
        path = workspace.script_path(name)
        path.write_text("#!/usr/bin/env python3\n" + body, encoding="utf-8")
        return path

    return _write
