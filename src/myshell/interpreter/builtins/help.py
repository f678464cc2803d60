"""Help builtin - list the available commands."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...types import CommandContext, ExecResult


async def handle_help(ctx: "CommandContext", args: list[str]) -> "ExecResult":
    """Execute the help builtin.

    Usage: help [name]

    List the names of all builtins and commands, or check that a single
    name exists.
    """
    from ...types import ExecResult
    from . import BUILTINS

    names = sorted(set(BUILTINS) | set(ctx.commands))
    if args:
        name = args[0].lower()
        if name not in names:
            return ExecResult(
                stdout="",
                stderr=f"myshell: help: no help topics match '{args[0]}'\n",
                exit_code=1,
            )
        kind = "a shell builtin" if name in BUILTINS else "a command"
        return ExecResult(stdout=f"{name} is {kind}\n", stderr="", exit_code=0)

    return ExecResult(stdout="\n".join(names) + "\n", stderr="", exit_code=0)
