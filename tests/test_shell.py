from __future__ import annotations

from pathlib import Path

from uw.registry import default_registry
from uw.shell import (
    PROFILE_LINE,
    add_profile_line,
    bashrc_snippet,
    has_profile_line,
    remove_profile_line,
)


def test_bashrc_snippet_registers_every_entry_point() -> None:
    snippet = bashrc_snippet(default_registry())

    assert "_uw_complete()" in snippet
    assert 'uw --complete "${COMP_CWORD}" "${COMP_WORDS[@]}"' in snippet
    complete_line = [line for line in snippet.splitlines() if line.startswith("complete ")][0]
    assert complete_line.split()[-11:] == ["uw", *default_registry().local_names]


def test_add_profile_line_creates_profile(tmp_path: Path) -> None:
    profile = tmp_path / ".bashrc"

    assert add_profile_line(profile)
    assert profile.read_text(encoding="utf-8") == PROFILE_LINE + "\n"
    assert has_profile_line(profile)


def test_add_profile_line_is_not_repeated(tmp_path: Path) -> None:
    profile = tmp_path / ".bashrc"
    profile.write_text("export EDITOR=vi\n", encoding="utf-8")

    assert add_profile_line(profile)
    assert not add_profile_line(profile)
    assert profile.read_text(encoding="utf-8").count(PROFILE_LINE) == 1


def test_add_profile_line_after_unterminated_line(tmp_path: Path) -> None:
    profile = tmp_path / ".bashrc"
    profile.write_text("alias ll='ls -l'", encoding="utf-8")

    add_profile_line(profile)

    assert profile.read_text(encoding="utf-8") == f"alias ll='ls -l'\n{PROFILE_LINE}\n"


def test_remove_profile_line_keeps_other_lines(tmp_path: Path) -> None:
    profile = tmp_path / ".bashrc"
    profile.write_text(
        f"export A=1\n\n{PROFILE_LINE}\n# {PROFILE_LINE}\nexport B=2\n",
        encoding="utf-8",
    )

    assert remove_profile_line(profile)
    assert profile.read_text(encoding="utf-8") == f"export A=1\n\n# {PROFILE_LINE}\nexport B=2\n"


def test_remove_profile_line_when_absent(tmp_path: Path) -> None:
    profile = tmp_path / ".bashrc"

    assert not remove_profile_line(profile)
    assert not profile.exists()
