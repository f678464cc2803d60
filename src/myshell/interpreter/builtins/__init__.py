"""Shell builtins.

Builtins get the full CommandContext and may change interpreter state
(history, prompt symbols) or stop the shell.
"""

from .control import handle_exit
from .help import handle_help
from .history import handle_history
from .symbol import handle_symbol

BUILTINS = {
    "exit": handle_exit,
    "help": handle_help,
    "history": handle_history,
    "symbol": handle_symbol,
}

__all__ = [
    "BUILTINS",
    "handle_exit",
    "handle_help",
    "handle_history",
    "handle_symbol",
]
