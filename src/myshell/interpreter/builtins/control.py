"""Control builtin: exit."""

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...types import CommandContext, ExecResult

from ..errors import ExitError

logger = logging.getLogger(__name__)


def _usage_error(message: str) -> "ExecResult":
    from ...types import ExecResult

    return ExecResult(stdout="", stderr=f"myshell: exit: {message}\n", exit_code=1)


async def handle_exit(ctx: "CommandContext", args: list[str]) -> "ExecResult":
    """Execute the exit builtin.

    Usage: exit [n]

    Stop the shell with status n, masked to 0-255. Without n the status of
    the last command is used. A bad argument is reported and the shell keeps
    running.
    """
    if len(args) > 1:
        return _usage_error("too many arguments")

    exit_code = ctx.state.last_exit_code
    if args:
        try:
            exit_code = int(args[0]) & 255
        except ValueError:
            return _usage_error(f"{args[0]}: numeric argument required")

    logger.debug("exit requested with code %d", exit_code)
    raise ExitError(exit_code)
