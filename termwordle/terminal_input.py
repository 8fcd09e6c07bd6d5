"""Unbuffered single-key input from the terminal."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import TextIO

ESCAPE = "\x1b"
TAB = "\t"
ENTER_KEYS = ("\n", "\r")
BACKSPACE_KEYS = ("\x7f", "\b")


@dataclass(frozen=True)
class KeyPress:
    """A single key read from the terminal."""

    char: str

    @property
    def is_escape(self) -> bool:
        return self.char == ESCAPE

    @property
    def is_tab(self) -> bool:
        return self.char == TAB

    @property
    def is_enter(self) -> bool:
        return self.char in ENTER_KEYS

    @property
    def is_backspace(self) -> bool:
        return self.char in BACKSPACE_KEYS

    @property
    def is_printable(self) -> bool:
        return " " <= self.char <= "~"


def classify_key(ch: str) -> KeyPress:
    """Build a KeyPress from a single character."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return KeyPress(ch)


class KeyReader:
    """Reads keys one at a time, with line buffering and echo off while open."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdin
        self._saved_attrs = None
        self._use_msvcrt = False

    def _is_tty(self) -> bool:
        try:
            return self._stream.isatty()
        except (AttributeError, ValueError):
            return False

    def __enter__(self) -> KeyReader:
        if not self._is_tty():
            return self
        if os.name == "nt":
            self._use_msvcrt = True
            return self
        import termios

        fd = self._stream.fileno()
        self._saved_attrs = termios.tcgetattr(fd)
        raw = termios.tcgetattr(fd)
        raw[3] &= ~(termios.ICANON | termios.ECHO)
        termios.tcsetattr(fd, termios.TCSANOW, raw)
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def read(self) -> KeyPress:
        """Block until a key is available and return it; raise EOFError at end of input."""
        if self._use_msvcrt:
            import msvcrt

            ch = msvcrt.getwch()
        else:
            ch = self._stream.read(1)
        if not ch:
            raise EOFError("no more input")
        return classify_key(ch)

    def close(self) -> None:
        """Restore the terminal settings saved on entry."""
        if self._saved_attrs is not None:
            import termios

            termios.tcsetattr(self._stream.fileno(), termios.TCSANOW, self._saved_attrs)
            self._saved_attrs = None
        self._use_msvcrt = False