"""Interpreter module for myshell."""

from .errors import ExitError
from .expansion import (
    LAST_INPUT,
    escaped_at,
    expand,
    expand_arithmetic,
    expand_braces,
    expand_history,
    expand_variables,
    strip_escapes,
)
from .interpreter import Interpreter, split_command
from .types import InterpreterState, ShellOptions, VariableStore

__all__ = [
    "ExitError",
    "Interpreter",
    "InterpreterState",
    "LAST_INPUT",
    "ShellOptions",
    "VariableStore",
    "escaped_at",
    "expand",
    "expand_arithmetic",
    "expand_braces",
    "expand_history",
    "expand_variables",
    "split_command",
    "strip_escapes",
]
