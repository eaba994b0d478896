"""Running parsed commands: builtins, path lookup and output redirection."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Iterable

from sbsh.parser import Command, tokenize_input

DEFAULT_PATH = ("/bin",)
_REDIRECT = ">"


class ExitShell(Exception):
    """Raised when the ``exit`` builtin asks the shell to stop."""


class ShellError(Exception):
    """A command could not be run; the message is meant for the user."""


class Shell:
    """Shell state: the search path and the builtins that change it."""

    def __init__(self, path: Iterable[str] | str = DEFAULT_PATH) -> None:
        self.path = [path] if isinstance(path, str) else list(path)

    def _directories(self):
        for entry in self.path:
            yield from (part for part in entry.split(":") if part)

    def find_executable(self, name: str) -> str | None:
        """Return the first executable ``dir/name`` on the search path, if any."""
        for directory in self._directories():
            candidate = f"{directory}/{name}"
            if os.access(candidate, os.X_OK):
                return candidate
        return None

    def _builtin_exit(self, args: list[str]) -> None:
        if len(args) != 1:
            raise ShellError("bad exit command")
        raise ExitShell()

    def _builtin_cd(self, args: list[str]) -> None:
        if len(args) != 2:
            raise ShellError("specify a directory for cd")
        try:
            os.chdir(args[1])
        except OSError as exc:
            raise ShellError("directory does not exist") from exc

    def _builtin_path(self, args: list[str]) -> None:
        self.path = list(args[1:])

    @staticmethod
    def _split_redirection(args: list[str]) -> tuple[list[str], str | None]:
        positions = [i for i, token in enumerate(args) if token == _REDIRECT]
        if not positions:
            return args, None
        if len(positions) > 1:
            raise ShellError("redirection failed")
        index = positions[0]
        if index != len(args) - 2 or not args[index + 1]:
            raise ShellError("bad redirection")
        return args[:index], args[index + 1]

    def execute(self, command: Command | Iterable[str]) -> subprocess.Popen | None:
        """Run one command.

        Builtins run in place and return ``None``; an external program is
        started and its process returned without waiting for it.
        """
        args = list(command)
        if not args:
            return None
        builtin = {
            "exit": self._builtin_exit,
            "cd": self._builtin_cd,
            "path": self._builtin_path,
        }.get(args[0])
        if builtin is not None:
            builtin(args)
            return None

        cmd_args, target = self._split_redirection(args)
        if not self.path or not any(self.path):
            raise ShellError("bad path")

        executable = self.find_executable(args[0])
        if executable is None:
            raise ShellError("command does not exist")

        stdout = None
        if target is not None:
            try:
                stdout = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
            except OSError as exc:
                raise ShellError("failed to open file") from exc
        sys.stdout.flush()
        try:
            return subprocess.Popen(cmd_args or [args[0]], executable=executable, stdout=stdout)
        except OSError as exc:
            raise ShellError("execv failed") from exc
        finally:
            if stdout is not None:
                os.close(stdout)

    def run_line(self, line: str) -> list[int]:
        """Run every command of ``line`` in parallel and wait for them.

        Returns the exit codes of the programs started. Errors are reported
        on standard error and do not stop the other commands; ``exit``
        raises :class:`ExitShell`.
        """
        processes = []
        for command in tokenize_input(line):
            try:
                process = self.execute(command)
            except ShellError as exc:
                print(exc, file=sys.stderr)
                continue
            if process is not None:
                processes.append(process)
        return [process.wait() for process in processes]