"""myshell - an interactive shell with brace, history, variable and arithmetic expansion.

Example usage:
    from myshell import Shell

    shell = Shell()
    result = shell.run("echo file{1..3}.txt")
    print(result.stdout)
"""

from .interpreter import ExitError, InterpreterState, ShellOptions, VariableStore, expand
from .shell import Shell, read_input
from .types import Command, CommandContext, ExecResult

__version__ = "0.1.0"

__all__ = [
    "Command",
    "CommandContext",
    "ExecResult",
    "ExitError",
    "InterpreterState",
    "Shell",
    "ShellOptions",
    "VariableStore",
    "expand",
    "read_input",
]
