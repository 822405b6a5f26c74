"""Command implementations behind the registry names."""

from __future__ import annotations

import logging
import runpy
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from .contract import not_implemented
from .errors import DelegationError, WorkspaceRequiredError
from .models import CommandDescription, CommandSpec, Workspace

logger = logging.getLogger(__name__)


class Command(ABC):
    """A runnable command that can also describe its completions."""

    def __init__(self, spec: CommandSpec) -> None:
        self.spec = spec

    @property
    def name(self) -> str:
        return self.spec.name

    @abstractmethod
    def describe(self) -> CommandDescription:
        """Return help text and suggested targets without running anything."""

    @abstractmethod
    def run(self, args: Sequence[str]) -> int:
        """Perform the command's action and return its exit status."""


class GlobalCommand(Command):
    """Built-in command with a fixed action."""

    def __init__(self, spec: CommandSpec, action: Callable[[Sequence[str]], int]) -> None:
        super().__init__(spec)
        self._action = action

    def describe(self) -> CommandDescription:
        return CommandDescription(help=self.spec.help)

    def run(self, args: Sequence[str]) -> int:
        return self._action(args)


class StubCommand(Command):
    """Workspace command with no implementation yet."""

    def describe(self) -> CommandDescription:
        return CommandDescription()

    def run(self, args: Sequence[str]) -> int:
        not_implemented(self.name)
        return 1


class DetachedCommand(Command):
    """Local command invoked where no workspace can be found."""

    def describe(self) -> CommandDescription:
        return CommandDescription()

    def run(self, args: Sequence[str]) -> int:
        raise WorkspaceRequiredError(self.name)


class ScriptCommand(Command):
    """Local command implemented by a script in the workspace marker directory.

    The environment script runs first; the names it defines are visible to
    the command script, together with ``WORKSPACE``. The command script
    declares ``HELP`` and ``TARGETS`` at module level and implements
    ``main(args)``, which returns an exit status or ``None`` for success.
    """

    def __init__(self, spec: CommandSpec, workspace: Workspace) -> None:
        super().__init__(spec)
        self.workspace = workspace
        self._namespace: dict[str, Any] | None = None

    @property
    def script(self) -> Path:
        return self.workspace.script_path(self.name)

    def _load(self) -> dict[str, Any]:
        if self._namespace is not None:
            return self._namespace
        namespace: dict[str, Any] = {"WORKSPACE": self.workspace}
        env_script = self.workspace.env_script
        if env_script.is_file():
            logger.debug("loading environment %s", env_script)
            env = runpy.run_path(str(env_script), init_globals=namespace, run_name="uw_env")
            namespace = {key: value for key, value in env.items() if not key.startswith("__")}
            namespace["WORKSPACE"] = self.workspace
        logger.debug("loading %s", self.script)
        self._namespace = runpy.run_path(
            str(self.script),
            init_globals=namespace,
            run_name=f"uw_{self.name}",
        )
        return self._namespace

    def describe(self) -> CommandDescription:
        namespace = self._load()
        help_text = namespace.get("HELP") or ""
        targets = namespace.get("TARGETS") or ()
        if isinstance(targets, str):
            targets = (targets,)
        return CommandDescription(
            help=str(help_text),
            targets=tuple(str(target) for target in targets),
        )

    def run(self, args: Sequence[str]) -> int:
        entry = self._load().get("main")
        if not callable(entry):
            not_implemented(self.name)
        status = entry(list(args))
        if status is None:
            return 0
        if not isinstance(status, int):
            raise DelegationError(
                f"{self.name}: main returned {status!r}, expected an exit status"
            )
        return int(status)


def local_command(spec: CommandSpec, workspace: Workspace | None) -> Command:
    """Pick the implementation of a local command for ``workspace``."""
    if workspace is None:
        return DetachedCommand(spec)
    if workspace.script_path(spec.name).is_file():
        return ScriptCommand(spec, workspace)
    return StubCommand(spec)
