"""Coloured status messages for the terminal."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text


def use_emoji() -> bool:
    """Return True unless the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" not in os.environ


def _emit(prefix: str, message: str, style: str) -> None:
    console = Console(highlight=False, soft_wrap=True)
    console.print(Text.assemble((prefix, style), " ", (message, style)))


def warn(message: str) -> None:
    """Print a warning line in red."""
    prefix = "⚠️ " if use_emoji() else "!"
    _emit(prefix, message, "red")


def success(message: str) -> None:
    """Print a success line in green."""
    prefix = "✅" if use_emoji() else "✓"
    _emit(prefix, message, "green")