"""Command-line entry point: loads word lists and runs the game loop."""

from __future__ import annotations

import argparse
import random
import sys
import time
from collections import defaultdict
from pathlib import Path
from typing import Protocol, TextIO

from termwordle.game import Game, GameStatus, WordBank
from termwordle.terminal_input import KeyPress, KeyReader
from termwordle.utils import Margins, clear_screen, terminal_margins
from termwordle.visuals import Renderer

FRAME_DELAY = 0.016


class _Reader(Protocol):
    def read(self) -> KeyPress: ...


def load_word_bank(path: str | Path) -> dict[int, WordBank]:
    """Read a word list, one word per line, into word banks keyed by word length.

    Blank lines and lines starting with '#' are skipped. Every word is both
    accepted as a guess and eligible as an answer.
    """
    by_length: dict[int, dict[str, None]] = defaultdict(dict)
    with open(path, encoding="utf-8") as handle:
        for lineno, line in enumerate(handle, start=1):
            word = line.strip().lower()
            if not word or word.startswith("#"):
                continue
            if not (word.isascii() and word.isalpha()):
                raise ValueError(f"{path}:{lineno}: not a word: {word!r}")
            by_length[len(word)][word] = None
    return {length: WordBank(words, words) for length, words in sorted(by_length.items())}


def _merge(first: WordBank, second: WordBank) -> WordBank:
    answers = dict.fromkeys(first.answers)
    answers.update(dict.fromkeys(second.answers))
    return WordBank(first.acceptable | second.acceptable, answers)


def _is_tty(out: TextIO) -> bool:
    try:
        return out.isatty()
    except (AttributeError, ValueError):
        return False


def run(
    game: Game,
    reader: _Reader,
    renderer: Renderer,
    out: TextIO | None = None,
) -> GameStatus:
    """Run the game until it is won, lost, escaped or input runs out."""
    out = out if out is not None else sys.stdout
    live = _is_tty(out)

    def draw() -> None:
        if live:
            clear_screen()
        out.write(renderer.render(game, terminal_margins() if live else Margins()))
        out.flush()

    key: KeyPress | None = None
    while True:
        draw()
        if key is not None:
            try:
                game.handle_key(key)
            except ValueError:
                pass
        draw()

        status = game.status()
        if status is GameStatus.WON:
            draw()
            out.write("You won!\n")
            break
        if status is GameStatus.LOST:
            draw()
            out.write(f"You lost! The answer was: {game.solution}\n")
            break

        try:
            key = reader.read()
        except EOFError:
            break
        if key.is_escape:
            break
        time.sleep(FRAME_DELAY)

    out.write("Closing application...\n")
    out.flush()
    return game.status()


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, load the word lists and play one game."""
    parser = argparse.ArgumentParser(prog="termwordle", description="Play Wordle in the terminal.")
    parser.add_argument("word_lists", nargs="+", type=Path, help="files with one word per line")
    parser.add_argument("--length", type=int, choices=(5, 6, 7), default=5, help="starting word length")
    parser.add_argument("--seed", type=int, default=None, help="seed for choosing the answer")
    args = parser.parse_args(argv)

    banks: dict[int, WordBank] = {}
    for path in args.word_lists:
        try:
            loaded = load_word_bank(path)
        except (OSError, ValueError) as exc:
            parser.error(str(exc))
        for length, bank in loaded.items():
            previous = banks.get(length)
            banks[length] = bank if previous is None else _merge(previous, bank)

    if args.length not in banks:
        parser.error(f"no {args.length}-letter words in the given word lists")

    game = Game(banks, args.length, rng=random.Random(args.seed))
    with KeyReader(sys.stdin) as reader:
        run(game, reader, Renderer(), sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())