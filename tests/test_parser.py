from __future__ import annotations

import pytest

from uw.errors import UsageError
from uw.parser import parse_invocation, require_command
from uw.registry import default_registry


def test_global_options_before_command() -> None:
    invocation = parse_invocation(["--version", "uwb", "x"], default_registry())

    assert invocation.has("--version")
    assert invocation.command == "uwb"
    assert invocation.args == ("x",)


def test_tokens_after_command_are_untouched() -> None:
    invocation = parse_invocation(["uwa", "--help", "--bashrc"], default_registry())

    assert invocation.options == frozenset()
    assert invocation.command == "uwa"
    assert invocation.args == ("--help", "--bashrc")


def test_several_global_options() -> None:
    invocation = parse_invocation(["--help", "--bashrc"], default_registry())

    assert invocation.has("--help")
    assert invocation.has("--bashrc")
    assert invocation.command is None
    assert invocation.args == ()


def test_empty_invocation() -> None:
    invocation = parse_invocation([], default_registry())

    assert invocation.command is None
    assert invocation.options == frozenset()


def test_unknown_option_stops_option_scan() -> None:
    invocation = parse_invocation(["--help", "--bogus", "init"], default_registry())

    assert invocation.command == "--bogus"
    assert invocation.args == ("init",)


def test_require_command_without_command() -> None:
    registry = default_registry()
    with pytest.raises(UsageError, match="no command specified"):
        require_command(parse_invocation([], registry), registry)


def test_require_command_unknown_option() -> None:
    registry = default_registry()
    with pytest.raises(UsageError, match="unknown option: --bogus"):
        require_command(parse_invocation(["--bogus"], registry), registry)


def test_require_command_unknown_command() -> None:
    registry = default_registry()
    with pytest.raises(UsageError, match="unknown command: frobnicate"):
        require_command(parse_invocation(["frobnicate"], registry), registry)


def test_require_command_known() -> None:
    registry = default_registry()
    assert require_command(parse_invocation(["init", "dir"], registry), registry) == "init"
