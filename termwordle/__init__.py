"""Wordle played in the terminal, with guess scoring, rendering and key input."""

__version__ = "0.1.0"