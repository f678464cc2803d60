"""Interpreter types for myshell."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

HISTORY_SENTINEL = ""
"""First history entry, so that ``!!`` on the first input expands to nothing."""


class VariableStore(dict):
    """Dict subclass holding the shell variables.

    Inherits from dict so callers can read and assign variables with plain
    item access. Lookups through :meth:`resolve` fall back to the process
    environment for names the shell itself has never set.
    """

    def resolve(self, name: str) -> Optional[str]:
        """Return the value of ``name``, or None if it is set nowhere.

        Shell variables shadow process environment variables.
        """
        if name in self:
            return self[name]
        return os.environ.get(name)

    def to_env_dict(self) -> dict[str, str]:
        """Return a plain dict copy (for ExecResult)."""
        return dict(self)


@dataclass
class ShellOptions:
    """Prompt symbols of the shell (changeable with the symbol builtin)."""

    prompt_symbol: str = ">"
    """Written after the directory name when the shell is ready for input."""

    morelines_symbol: str = "\\"
    """Typed at the end of a line to continue the command on the next line."""

    multiline_symbol: str = "|"
    """Prompt written while a multi-line command is being read."""


SYMBOL_VARIABLES = {
    "PROMPT": "prompt_symbol",
    "MORELINES": "morelines_symbol",
    "MULTILINE": "multiline_symbol",
}
"""Variable name -> ShellOptions attribute for the mirrored prompt symbols."""


@dataclass
class InterpreterState:
    """Mutable state maintained by the interpreter."""

    env: VariableStore = field(default_factory=VariableStore)
    """Shell variables (VariableStore is a dict subclass)."""

    history: list[str] = field(default_factory=lambda: [HISTORY_SENTINEL])
    """Raw input lines, oldest first, starting with the empty sentinel."""

    cwd: str = field(default_factory=os.getcwd)
    """Current working directory."""

    last_exit_code: int = 0
    """Exit code of the last command."""

    options: ShellOptions = field(default_factory=ShellOptions)
    """Prompt symbols."""

    def __post_init__(self) -> None:
        if not self.history:
            self.history.append(HISTORY_SENTINEL)
        # A single character already stored under a symbol variable wins over options
        for variable, attribute in SYMBOL_VARIABLES.items():
            value = self.env.get(variable)
            if isinstance(value, str) and len(value) == 1:
                setattr(self.options, attribute, value)
            else:
                self.env[variable] = getattr(self.options, attribute)

    def set_symbol(self, variable: str, symbol: str) -> None:
        """Change one of the prompt symbols and its mirrored variable."""
        setattr(self.options, SYMBOL_VARIABLES[variable], symbol)
        self.env[variable] = symbol

    def add_to_history(self, line: str) -> None:
        """Append a raw input line to history.

        Unescaped ``!!`` references in the line are resolved against the
        previous entry first, so a stored entry never refers to itself.
        """
        from .expansion import expand_history

        self.history.append(expand_history(line, self.history))
