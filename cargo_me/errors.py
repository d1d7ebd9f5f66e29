"""Exception hierarchy shared by the scaffolder and the CLI."""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for failures that abort a scaffolding run."""


class ToolFailure(ScaffoldError):
    """Raised when the external ``cargo new`` command fails."""

    def __init__(self, command: list[str], returncode: int, detail: str = "") -> None:
        self.command = command
        self.returncode = returncode
        message = f"`{' '.join(command)}` exited with status {returncode}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class InvalidProjectName(ScaffoldError):
    """Raised when the crate name cannot be derived from the given path."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Invalid crate name {path!r}: the path must end in a crate name")
