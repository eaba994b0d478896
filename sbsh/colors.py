"""ANSI escape sequences for coloured terminal text."""

from __future__ import annotations

import enum


class TextColor(str, enum.Enum):
    """ANSI SGR sequences for the shell's text colours."""

    BLACK = "\033[0;30m"
    BLACK_BOLD = "\033[1;30m"
    BLUE = "\033[0;34m"
    BLUE_BOLD = "\033[1;34m"
    GREEN = "\033[0;32m"
    GREEN_BOLD = "\033[1;32m"
    PURPLE = "\033[0;35m"
    PURPLE_BOLD = "\033[1;35m"
    RED = "\033[0;31m"
    RED_BOLD = "\033[1;31m"
    CYAN = "\033[0;36m"
    CYAN_BOLD = "\033[1;36m"
    RESET = "\033[0m"

    def __str__(self) -> str:
        return self.value


def colorize(text: str, color: TextColor) -> str:
    """Wrap ``text`` in ``color`` and a trailing reset sequence."""
    color = TextColor(color)
    return f"{color.value}{text}{TextColor.RESET.value}"