"""History builtin."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...types import CommandContext, ExecResult


async def handle_history(ctx: "CommandContext", args: list[str]) -> "ExecResult":
    """Execute the history builtin.

    Usage: history [n]

    List the lines entered so far, oldest first, one per line. With n,
    list only the last n lines. The current line is not yet part of history.
    """
    from ...types import ExecResult

    # Skip the empty sentinel entry
    entries = list(enumerate(ctx.state.history[1:], start=1))
    if args:
        try:
            count = int(args[0])
        except ValueError:
            return ExecResult(
                stdout="",
                stderr=f"myshell: history: {args[0]}: numeric argument required\n",
                exit_code=1,
            )
        entries = entries[-count:] if count > 0 else []

    width = len(str(len(ctx.state.history) - 1))
    lines = [f"{number:>{width}}  {line}" for number, line in entries]
    return ExecResult(
        stdout="\n".join(lines) + "\n" if lines else "",
        stderr="",
        exit_code=0,
    )
