"""Command registry for myshell."""

from ..types import Command
from .echo import EchoCommand
from .env import EnvCommand
from .pwd import PwdCommand


def create_command_registry() -> dict[str, Command]:
    """Create the default registry, keyed by lower-case command name."""
    commands: list[Command] = [
        EchoCommand(),
        EnvCommand(),
        PwdCommand(),
    ]
    return {command.name: command for command in commands}


__all__ = [
    "create_command_registry",
    "EchoCommand",
    "EnvCommand",
    "PwdCommand",
]
