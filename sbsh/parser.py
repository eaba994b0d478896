"""Splitting of input lines into commands and tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass

_TOKEN_RE = re.compile(r">|[^\s>]+")


@dataclass(frozen=True)
class Command:
    """One command of an input line, as a sequence of tokens."""

    tokens: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "tokens", tuple(self.tokens))

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self):
        return iter(self.tokens)


def tokenize_command(cmd_str: str) -> list[str]:
    """Split a command into tokens on whitespace; ``>`` is always its own token."""
    return _TOKEN_RE.findall(cmd_str)


def tokenize_input(line: str) -> list[Command]:
    """Split a line on ``&`` into commands, dropping those with no tokens."""
    commands = []
    for segment in line.split("&"):
        tokens = tokenize_command(segment)
        if tokens:
            commands.append(Command(tuple(tokens)))
    return commands