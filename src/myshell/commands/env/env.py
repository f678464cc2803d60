"""Env command implementation."""

from ...types import CommandContext, ExecResult


class EnvCommand:
    """The env command - print shell variables."""

    name = "env"

    async def execute(self, args: list[str], ctx: CommandContext) -> ExecResult:
        """Execute the env command."""
        if "--help" in args:
            return ExecResult(
                stdout="Usage: env [VARIABLE]...\n",
                stderr="",
                exit_code=0,
            )

        if not args:
            lines = [f"{k}={v}" for k, v in sorted(ctx.env.items())]
            return ExecResult(
                stdout="\n".join(lines) + "\n" if lines else "",
                stderr="",
                exit_code=0,
            )

        # Print specific variables, falling back to the process environment
        output_lines = []
        exit_code = 0

        for name in args:
            value = ctx.state.env.resolve(name)
            if value is not None:
                output_lines.append(value)
            else:
                exit_code = 1

        output = "\n".join(output_lines)
        if output:
            output += "\n"

        return ExecResult(stdout=output, stderr="", exit_code=exit_code)
