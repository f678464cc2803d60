"""Interpreter - line dispatch.

Runs one raw input line at a time:
- Input expansion (expansion.py) turns it into one or more command lines
- Each command line is split into a command name and an argument string
- Built-in commands (builtins/) and registered commands handle the line,
  anything else may be a variable assignment
- The raw line is stored in history once it has been dispatched
"""

import logging
import re
from typing import Optional

from ..types import Command, CommandContext, ExecResult
from .builtins import BUILTINS
from .errors import ExitError
from .expansion import expand
from .types import InterpreterState

logger = logging.getLogger(__name__)

COMMAND_NOT_FOUND = 127

_ASSIGNMENT_RE = re.compile(r"([^\W\d]\w*)=(?!\s)(.*)", re.DOTALL)


def split_command(line: str) -> tuple[str, Optional[str]]:
    """Split a command line into its name and argument string.

    The argument string is None when the line holds only the name.
    """
    parts = line.split(None, 1)
    name = parts[0]
    arg = parts[1].strip() if len(parts) > 1 else None
    return name, arg


def _result(stdout: str, stderr: str, exit_code: int) -> ExecResult:
    """Create an ExecResult."""
    return ExecResult(stdout=stdout, stderr=stderr, exit_code=exit_code)


class Interpreter:
    """Dispatches expanded input lines to builtins and commands."""

    def __init__(
        self,
        commands: dict[str, Command],
        state: Optional[InterpreterState] = None,
    ):
        """Initialize the interpreter.

        Args:
            commands: Command registry, keyed by lower-case name
            state: Optional initial state (creates default if not provided)
        """
        self._commands = commands
        self._state = state or InterpreterState()

    @property
    def state(self) -> InterpreterState:
        """Get the interpreter state."""
        return self._state

    async def execute_line(self, line: str) -> ExecResult:
        """Expand and execute one raw line of input.

        Output of all expanded command lines is concatenated. An unknown
        command stops the remaining lines. ExitError from the exit builtin
        propagates with the output gathered so far.
        """
        stdout_parts: list[str] = []
        stderr_parts: list[str] = []
        exit_code = 0

        try:
            for command_line in expand(self._state, line):
                command_line = command_line.strip()
                if not command_line:
                    continue

                try:
                    result = await self.execute_command_line(command_line)
                except ExitError as error:
                    error.stdout = "".join(stdout_parts) + error.stdout
                    error.stderr = "".join(stderr_parts) + error.stderr
                    raise

                stdout_parts.append(result.stdout)
                stderr_parts.append(result.stderr)
                exit_code = result.exit_code
                self._state.last_exit_code = exit_code
                if exit_code == COMMAND_NOT_FOUND:
                    break
        finally:
            if line.strip():
                self._state.add_to_history(line)

        return ExecResult(
            stdout="".join(stdout_parts),
            stderr="".join(stderr_parts),
            exit_code=exit_code,
            env=self._state.env.to_env_dict(),
        )

    async def execute_command_line(self, line: str) -> ExecResult:
        """Execute a single, already expanded command line."""
        name, arg = split_command(line)
        args = arg.split() if arg else []
        ctx = CommandContext(state=self._state, arg=arg, commands=self._commands)

        key = name.lower()
        if key in BUILTINS:
            return await BUILTINS[key](ctx, args)

        command = self._commands.get(key)
        if command is not None:
            return await command.execute(args, ctx)

        if self._try_assign_variable(line):
            return _result("", "", 0)

        logger.debug("unknown command %r", name)
        return _result("", f"myshell: {name}: command not found\n", COMMAND_NOT_FOUND)

    def _try_assign_variable(self, line: str) -> bool:
        """Assign ``name=value`` if the line has that form.

        The name must be an identifier and the value must not start with
        whitespace.
        """
        match = _ASSIGNMENT_RE.fullmatch(line)
        if match is None:
            return False
        name, value = match.groups()
        logger.debug("assigning %r to %s", value, name)
        self._state.env[name] = value
        return True
