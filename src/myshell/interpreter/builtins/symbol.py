"""Symbol builtin - show or change the prompt symbols."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...types import CommandContext, ExecResult

from ..types import SYMBOL_VARIABLES


async def handle_symbol(ctx: "CommandContext", args: list[str]) -> "ExecResult":
    """Execute the symbol builtin.

    Usage: symbol [PROMPT|MORELINES|MULTILINE] [char]

    Without arguments, list all symbols. With a symbol name, print that
    symbol. With a name and a single character, change the symbol.
    """
    from ...types import ExecResult

    if not args:
        lines = [f"{name} = '{ctx.env[name]}'" for name in SYMBOL_VARIABLES]
        return ExecResult(stdout="\n".join(lines) + "\n", stderr="", exit_code=0)

    name = args[0].upper()
    if name not in SYMBOL_VARIABLES:
        return ExecResult(
            stdout="",
            stderr=f"myshell: symbol: {args[0]}: unknown symbol name\n",
            exit_code=1,
        )

    if len(args) == 1:
        return ExecResult(stdout=f"{name} = '{ctx.env[name]}'\n", stderr="", exit_code=0)

    new_symbol = args[1]
    if len(new_symbol) != 1 or len(args) > 2:
        return ExecResult(
            stdout="",
            stderr="myshell: symbol: the symbol must be a single character\n",
            exit_code=1,
        )

    old_symbol = ctx.env[name]
    ctx.state.set_symbol(name, new_symbol)
    return ExecResult(
        stdout=f"Symbol for {name} changed from '{old_symbol}' to '{new_symbol}'\n",
        stderr="",
        exit_code=0,
    )
