"""Command-line entry point: interactive and batch modes."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO

from sbsh.colors import TextColor, colorize
from sbsh.executor import ExitShell, Shell

PROMPT = "sbsh::$ "


def prompt(stream: TextIO) -> None:
    """Write the interactive prompt to ``stream``."""
    stream.write(colorize(PROMPT, TextColor.CYAN))
    stream.flush()


def read_lines(stream: TextIO, interactive: bool) -> Iterator[str]:
    """Yield lines of ``stream`` without line endings, prompting if interactive."""
    while True:
        if interactive:
            prompt(sys.stdout)
        line = stream.readline()
        if not line:
            return
        yield line.rstrip("\r\n")


def _run(shell: Shell, stream: TextIO, interactive: bool) -> int:
    try:
        for line in read_lines(stream, interactive):
            shell.run_line(line)
    except ExitShell:
        return 0
    except (OSError, UnicodeDecodeError):
        print("read_line failed", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the shell; with one argument, read commands from that file."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 1:
        print("only accepts 0 or 1 arguments", file=sys.stderr)
        return 1
    shell = Shell()
    if not args:
        return _run(shell, sys.stdin, True)
    try:
        batch = open(args[0], encoding="utf-8")
    except OSError:
        print("fopen failed", file=sys.stderr)
        return 1
    with batch:
        return _run(shell, batch, False)


if __name__ == "__main__":
    sys.exit(main())