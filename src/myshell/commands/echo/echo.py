"""Echo command implementation.

Usage: echo [-n] [-s] [TEXT]

Write TEXT to standard output, followed by a newline. TEXT is written
exactly as it was expanded, including its inner spacing.

Options:
  -n    Do not append a newline
  -s    Append a space instead of a newline
"""

from ...types import CommandContext, ExecResult


class EchoCommand:
    """The echo command."""

    name = "echo"

    async def execute(self, args: list[str], ctx: CommandContext) -> ExecResult:
        """Execute the echo command."""
        no_newline = False
        append_space = False

        text = ctx.arg or ""
        # Leading option words are consumed from the raw argument string
        while text:
            option, _, rest = text.partition(" ")
            if option not in ("-n", "-s", "-ns", "-sn"):
                break
            if "n" in option:
                no_newline = True
            if "s" in option:
                append_space = True
            text = rest.lstrip()

        if append_space:
            return ExecResult(stdout=text + " ", stderr="", exit_code=0)
        if no_newline:
            return ExecResult(stdout=text, stderr="", exit_code=0)
        return ExecResult(stdout=text + "\n", stderr="", exit_code=0)
