"""A small command shell with batch mode, parallel commands and output redirection."""

__version__ = "0.1.0"
__all__ = ["cli", "colors", "executor", "parser"]