"""Error taxonomy for the uw dispatcher.

Every error the dispatcher reports itself derives from ``UwError`` and carries
the exit code the process should terminate with. Failures raised by user
scripts are not wrapped.
"""

from __future__ import annotations

from pathlib import Path


class UwError(Exception):
    """Base class for errors reported as a one-line diagnostic."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class UsageError(UwError):
    """Malformed invocation: missing or unknown command or option."""


class WorkspaceError(UwError):
    """A workspace precondition does not hold."""


class WorkspaceRequiredError(WorkspaceError):
    def __init__(self, command: str) -> None:
        super().__init__(f"{command}: not inside a workspace (run 'uw init' first)")
        self.command = command


class WorkspaceExistsError(WorkspaceError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"workspace already initialized: {path}")
        self.path = path


class DelegationError(UwError):
    """A workspace script declined or failed to perform its action."""


class CommandNotImplementedError(DelegationError):
    def __init__(self, command: str, exit_code: int = 1) -> None:
        super().__init__(f"{command}: not implemented", exit_code=exit_code)
        self.command = command


class UpdateError(UwError):
    """Self-update could not fetch or install the latest release."""
