"""Console entry point: ``myshell`` or ``python -m myshell``."""

import argparse
import logging
import sys
from typing import Optional

from .shell import Shell, read_input

logger = logging.getLogger(__name__)


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _readline() -> Optional[str]:
    line = sys.stdin.readline()
    return line if line else None


def repl(shell: Shell) -> int:
    """Read and execute lines until exit or end of input."""
    exit_code = 0
    while not shell.terminated:
        _write(shell.prompt())
        line = read_input(_readline, _write, shell.options)
        if line is None:
            _write("\n")
            break
        result = shell.run(line)
        _write(result.stdout)
        sys.stderr.write(result.stderr)
        exit_code = result.exit_code
    return exit_code


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="myshell",
        description="Interactive shell with brace, history, variable and arithmetic expansion.",
    )
    parser.add_argument("-c", dest="command", metavar="COMMAND", help="run COMMAND and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="log expansion details")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    shell = Shell()
    if args.command is not None:
        result = shell.run(args.command)
        _write(result.stdout)
        sys.stderr.write(result.stderr)
        return result.exit_code

    logger.debug("starting interactive session in %s", shell.cwd)
    return repl(shell)


if __name__ == "__main__":
    sys.exit(main())
