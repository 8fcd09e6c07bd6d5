"""Wordle game state: board, guess scoring and key handling."""

from __future__ import annotations

import random
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum, IntEnum

from termwordle.terminal_input import KeyPress

DEFAULT_WORD_LENGTH = 5
DEFAULT_ROWS = 6
CURSOR = "_"
EMPTY_CELL = " "
MENU_KEYS = {"1": 5, "2": 6, "3": 7}


class LetterColor(IntEnum):
    """Colour assigned to a letter of a submitted guess."""

    NONE = 0
    GREEN = 1
    YELLOW = 2
    GREY = 3


class GameStatus(Enum):
    """Whether the game is still going, won or lost."""

    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class InvalidGuessError(ValueError):
    """Raised when a submitted guess is not an acceptable word."""


@dataclass(frozen=True)
class WordBank:
    """Words accepted as guesses and words that may be chosen as answers."""

    acceptable: frozenset[str] = field(default_factory=frozenset)
    answers: tuple[str, ...] = ()

    def __init__(self, acceptable: Iterable[str] = (), answers: Iterable[str] = ()) -> None:
        object.__setattr__(self, "acceptable", frozenset(acceptable))
        object.__setattr__(self, "answers", tuple(answers))

    def random_word(self, rng: random.Random | None = None) -> str:
        """Pick one of the possible answers at random."""
        if not self.answers:
            raise ValueError("word bank has no possible answers")
        return (rng or random).choice(self.answers)


def score_guess(attempt: str, solution: str) -> list[LetterColor]:
    """Colour each letter of the attempt against the solution, Wordle style."""
    if len(attempt) != len(solution):
        raise ValueError("attempt and solution must have the same length")
    colors = [LetterColor.NONE] * len(attempt)
    used = [False] * len(solution)

    for i, (guessed, wanted) in enumerate(zip(attempt, solution)):
        if guessed == wanted:
            colors[i] = LetterColor.GREEN
            used[i] = True

    for i, guessed in enumerate(attempt):
        if colors[i] is LetterColor.GREEN:
            continue
        for j, wanted in enumerate(solution):
            if not used[j] and guessed == wanted:
                colors[i] = LetterColor.YELLOW
                used[j] = True
                break
        else:
            colors[i] = LetterColor.GREY
    return colors


class Game:
    """A single Wordle board driven one key press at a time."""

    def __init__(
        self,
        banks: Mapping[int, WordBank],
        word_length: int = DEFAULT_WORD_LENGTH,
        rows: int = DEFAULT_ROWS,
        rng: random.Random | None = None,
    ) -> None:
        if rows < 1:
            raise ValueError("a board needs at least one row")
        self.banks = dict(banks)
        self.rows = rows
        self.rng = rng if rng is not None else random.Random()
        self.invalid_word_msg = False
        self.invalid_length_msg = False
        self.setup(word_length)

    def setup(self, word_length: int) -> None:
        """Start a fresh board with words of the given length."""
        bank = self.banks.get(word_length)
        if bank is None:
            raise ValueError(f"no word bank for {word_length}-letter words")
        self.word_length = word_length
        self.solution = bank.random_word(self.rng)
        self.word_position = 0
        self.attempt_counter = 0
        self.won = False
        self.lost = False
        self.show_menu = False
        self.entered_words = [[EMPTY_CELL] * word_length for _ in range(self.rows)]
        self.letter_colors = [[LetterColor.NONE] * word_length for _ in range(self.rows)]

    @property
    def current_row(self) -> list[str]:
        return self.entered_words[self.attempt_counter]

    def _place_cursor(self) -> None:
        if self.word_position < self.word_length:
            self.current_row[self.word_position] = CURSOR

    def handle_key(self, key: KeyPress) -> None:
        """Apply one key press to the board."""
        ch = key.char
        consumed = False

        if "a" <= ch <= "z" and self.word_position < self.word_length:
            self.current_row[self.word_position] = ch.upper()
            self.word_position += 1
            self._place_cursor()
            consumed = True
        elif ch == " ":
            if self.word_position < self.word_length:
                self.word_position += 1
                self._place_cursor()
            consumed = True

        if key.is_backspace and self.word_position > 0:
            if self.word_position < self.word_length:
                self.current_row[self.word_position] = ""
            self.word_position -= 1
            self.current_row[self.word_position] = CURSOR

        if key.is_enter:
            if self.word_position == self.word_length:
                try:
                    self.try_guess()
                except InvalidGuessError:
                    self.invalid_word_msg = True
            else:
                self.invalid_length_msg = True

        if key.is_tab:
            self.show_menu = not self.show_menu

        if self.show_menu and not consumed and ch in MENU_KEYS:
            self.setup(MENU_KEYS[ch])

    def try_guess(self) -> None:
        """Submit the current row; raise InvalidGuessError if it is not a word."""
        attempt = "".join(cell[0].lower() if cell else CURSOR for cell in self.current_row)
        bank = self.banks.get(self.word_length)
        if bank is not None and attempt not in bank.acceptable:
            raise InvalidGuessError(f"{attempt!r} is not an acceptable word")

        if attempt == self.solution:
            self.won = True
        self.letter_colors[self.attempt_counter] = score_guess(attempt, self.solution)

        self.word_position = 0
        if self.attempt_counter + 1 == self.rows:
            self.lost = True
            return
        self.attempt_counter += 1
        self.current_row[self.word_position] = CURSOR

    def status(self) -> GameStatus:
        """Report whether the game is won, lost or still in play."""
        if self.won:
            return GameStatus.WON
        if self.lost:
            return GameStatus.LOST
        return GameStatus.PLAYING