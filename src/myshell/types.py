"""Core types shared by the shell facade, the interpreter and commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from .interpreter.types import InterpreterState


@dataclass
class ExecResult:
    """Result of executing one input line or one command."""

    stdout: str = ""
    """Text written to standard output."""

    stderr: str = ""
    """Text written to standard error."""

    exit_code: int = 0
    """Exit code (0 means success)."""

    env: Optional[dict[str, str]] = None
    """Snapshot of the shell variables after execution."""


@dataclass
class CommandContext:
    """Everything a command gets to see while it executes."""

    state: "InterpreterState"
    """Interpreter state (variables, history, cwd, options)."""

    arg: Optional[str] = None
    """Raw argument string, or None when the command was given no argument."""

    commands: dict[str, "Command"] = field(default_factory=dict)
    """Command registry the command was looked up in."""

    @property
    def env(self) -> dict[str, str]:
        """Shell variables."""
        return self.state.env

    @property
    def cwd(self) -> str:
        """Current working directory."""
        return self.state.cwd


class Command(Protocol):
    """Protocol implemented by every command in the registry."""

    name: str

    async def execute(self, args: list[str], ctx: CommandContext) -> ExecResult:
        ...
