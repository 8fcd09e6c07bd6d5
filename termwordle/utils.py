"""Colour helpers, box drawing and terminal layout utilities."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from collections.abc import Iterable
from dataclasses import dataclass

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"
WHITE = "\033[37m"
GREY = "\033[90m"
RESET = "\033[0m"

DEFAULT_ROWS = 24
DEFAULT_COLS = 80

_ANSI_RE = re.compile(r"\x1B\[[0-9;]*m")


@dataclass(frozen=True)
class Margins:
    """Padding placed above and to the left of the board."""

    top: str = ""
    left: str = ""


def paint(text: str, color: str) -> str:
    """Wrap text in an ANSI colour code and a reset."""
    return f"{color}{text}{RESET}"


def remove_colors(items: Iterable[str]) -> list[str]:
    """Return the strings with every ANSI colour sequence removed."""
    return [_ANSI_RE.sub("", item) for item in items]


def clear_screen() -> None:
    """Clear the terminal using the platform's clear command."""
    command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
    try:
        subprocess.run(command, check=False)
    except OSError:
        pass


def array_to_representation(items: Iterable[str]) -> str:
    """Draw the strings as a single row of boxed cells."""
    cells = list(items)
    extra = max(len(cells) - 1, 0)
    top = "┌───" + "┬───" * extra + "┐"
    middle = "│ " + "".join(f"{cell} │ " for cell in cells)
    bottom = "└───" + "┴───" * extra + "┘"
    return f"{top}\n{middle}\n{bottom}"


def compute_margins(rows: int, cols: int) -> Margins:
    """Compute margins that roughly centre the board in a terminal of this size."""
    return Margins(top="\n" * (rows // 5), left=" " * (cols // 2 - 12))


def terminal_margins() -> Margins:
    """Compute margins from the current terminal size, falling back to 24x80."""
    rows, cols = DEFAULT_ROWS, DEFAULT_COLS
    try:
        size = os.get_terminal_size(sys.stdout.fileno())
    except (OSError, ValueError, AttributeError):
        print("Failed to get terminal size.", file=sys.stderr)
    else:
        rows, cols = size.lines, size.columns
    return compute_margins(rows, cols)