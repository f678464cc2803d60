"""Pwd command implementation.

Usage: pwd

Print the name of the current working directory.
"""

from ...types import CommandContext, ExecResult


class PwdCommand:
    """The pwd command."""

    name = "pwd"

    async def execute(self, args: list[str], ctx: CommandContext) -> ExecResult:
        """Execute the pwd command."""
        for arg in args:
            if arg.startswith("-"):
                return ExecResult(
                    stdout="",
                    stderr=f"pwd: invalid option -- '{arg[1:]}'\n",
                    exit_code=1,
                )
        return ExecResult(stdout=f"{ctx.cwd}\n", stderr="", exit_code=0)
