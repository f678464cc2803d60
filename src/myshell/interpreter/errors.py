"""Interpreter errors."""


class ExitError(Exception):
    """Raised by the exit builtin to terminate the shell.

    Carries the exit code and any output produced before exiting.
    """

    def __init__(self, exit_code: int, stdout: str = "", stderr: str = ""):
        super().__init__(f"exit {exit_code}")
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr
