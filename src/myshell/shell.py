"""Main Shell class - the primary API for myshell.

Example usage:
    from myshell import Shell

    # Synchronous usage (for the REPL, scripts)
    shell = Shell()
    result = shell.run("echo file{1..3}.txt")
    print(result.stdout)  # "file1.txt\nfile2.txt\nfile3.txt\n"

    # Async usage (for async applications)
    shell = Shell()
    result = await shell.exec("echo $((2^32))")
    print(result.stdout)  # "4294967296\n"

    # With initial variables
    shell = Shell(env={"name": "world"})
    result = shell.run("echo hello $name")
"""

import asyncio
import logging
import os
from typing import Callable, Optional

import nest_asyncio  # type: ignore[import-untyped]

from .commands import create_command_registry
from .interpreter import ExitError, Interpreter, InterpreterState, ShellOptions, VariableStore
from .types import Command, ExecResult

logger = logging.getLogger(__name__)


class Shell:
    """Main shell class.

    Owns one interpreter state (variables, history, prompt symbols) and
    executes input lines against it, one line at a time.
    """

    def __init__(
        self,
        *,
        env: Optional[dict[str, str]] = None,
        cwd: Optional[str] = None,
        options: Optional[ShellOptions] = None,
        commands: Optional[dict[str, Command]] = None,
    ):
        """Initialize the shell.

        Args:
            env: Initial shell variables. A single character under PROMPT,
                MORELINES or MULTILINE sets that prompt symbol and overrides
                ``options``; any other value there is replaced by the symbol.
            cwd: Initial working directory (defaults to the process cwd).
            options: Prompt symbols.
            commands: Custom command registry. If not provided, uses built-in commands.
        """
        self._commands = commands or create_command_registry()
        self._initial_env = dict(env or {})
        self._initial_cwd = cwd or os.getcwd()
        self._initial_options = options or ShellOptions()
        self._terminated = False
        self._interpreter = self._create_interpreter()

    def _create_interpreter(self) -> Interpreter:
        state = InterpreterState(
            env=VariableStore(self._initial_env),
            cwd=self._initial_cwd,
            options=ShellOptions(
                prompt_symbol=self._initial_options.prompt_symbol,
                morelines_symbol=self._initial_options.morelines_symbol,
                multiline_symbol=self._initial_options.multiline_symbol,
            ),
        )
        return Interpreter(commands=self._commands, state=state)

    @property
    def env(self) -> VariableStore:
        """Get the shell variables."""
        return self._interpreter.state.env

    @property
    def history(self) -> list[str]:
        """Get the input history (oldest first, empty sentinel first)."""
        return self._interpreter.state.history

    @property
    def cwd(self) -> str:
        """Get the current working directory."""
        return self._interpreter.state.cwd

    @property
    def options(self) -> ShellOptions:
        """Get the prompt symbols."""
        return self._interpreter.state.options

    @property
    def terminated(self) -> bool:
        """Whether the exit builtin has been executed."""
        return self._terminated

    def prompt(self) -> str:
        """Build the prompt: directory name followed by the prompt symbol."""
        name = os.path.basename(self.cwd.rstrip(os.sep)) or self.cwd
        return f"${name}{self.options.prompt_symbol} "

    async def exec(self, line: str) -> ExecResult:
        """Execute one line of input.

        Args:
            line: The raw input line, with any continuation lines joined.

        Returns:
            ExecResult with stdout, stderr, exit_code, and final variables.
        """
        try:
            return await self._interpreter.execute_line(line)
        except ExitError as error:
            logger.debug("shell exiting with code %d", error.exit_code)
            self._terminated = True
            return ExecResult(
                stdout=error.stdout,
                stderr=error.stderr,
                exit_code=error.exit_code,
                env=self._interpreter.state.env.to_env_dict(),
            )

    def run(self, line: str) -> ExecResult:
        """Execute one line of input synchronously.

        This is a convenience wrapper around exec() that works in any context,
        including Jupyter notebooks and async frameworks.

        Example:
            >>> shell = Shell()
            >>> result = shell.run("echo {a,b}")
            >>> print(result.stdout, end="")
            a
            b
        """
        try:
            asyncio.get_running_loop()
            # We're in an existing event loop (Jupyter, async framework, etc.)
            # Apply nest_asyncio to allow nested event loops
            nest_asyncio.apply()
        except RuntimeError:
            # No running event loop, asyncio.run() will work fine
            pass
        return asyncio.run(self.exec(line))

    def reset(self) -> None:
        """Reset the shell state to initial values."""
        self._terminated = False
        self._interpreter = self._create_interpreter()


def read_input(
    readline: Callable[[], Optional[str]],
    write: Callable[[str], object],
    options: ShellOptions,
) -> Optional[str]:
    """Read one logical line of input.

    A line ending with a space and the morelines symbol continues on the next
    line; the multiline symbol is written as the prompt for every
    continuation line. Returns None when input is exhausted.
    """
    line = readline()
    if line is None:
        return None

    line = line.strip()
    while line.endswith(" " + options.morelines_symbol):
        line = line[:-len(options.morelines_symbol)]
        write(options.multiline_symbol + " ")
        more = readline()
        if more is None:
            break
        line += more.strip()

    return line
