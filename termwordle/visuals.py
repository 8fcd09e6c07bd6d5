"""Rendering of the board, the on-screen keyboard and the options menu."""

from __future__ import annotations

from termwordle.game import Game, GameStatus, LetterColor
from termwordle.utils import GREEN, GREY, YELLOW, Margins, paint

VERTICAL = "│"
HORIZONTAL = "─"
CORNER_TL = "╭"
CORNER_TR = "╮"
CORNER_BL = "╰"
CORNER_BR = "╯"
CROSS_TOP = "┬"
CROSS_MID = "┼"
CROSS_BOT = "┴"
VERTICAL_SEP = "│"
HORIZONTAL_SEP = "├"
HORIZONTAL_END = "┤"

KEY_ORDER = "QWERTYUIOPASDFGHJKLZXCVBNM"
_KEY_ROWS = (KEY_ORDER[:10], KEY_ORDER[10:19], KEY_ORDER[19:])
_KEYBOARD_RULE = HORIZONTAL * 21
_MENU_RULE = HORIZONTAL * 32
_CELL_RULE = HORIZONTAL * 3

_COLOR_CODES = {
    LetterColor.GREEN: GREEN,
    LetterColor.YELLOW: YELLOW,
    LetterColor.GREY: GREY,
}


class Keyboard:
    """On-screen QWERTY keyboard whose keys take the colour of scored letters."""

    def __init__(self) -> None:
        self.keys: dict[str, str] = {letter: letter for letter in KEY_ORDER}

    def paint_key(self, letter: str, color: str) -> None:
        """Colour the key for the given letter; unknown letters are ignored."""
        if letter in self.keys:
            self.keys[letter] = paint(letter, color)

    def _row(self, letters: str) -> str:
        return "".join(f"{self.keys[letter]} " for letter in letters)

    def render(self, margin: str = "", offset: str = "") -> str:
        """Draw the keyboard as a framed block of three rows."""
        prefix = f"{offset}{margin} "
        first, second, third = _KEY_ROWS
        lines = [
            f"{prefix}{CORNER_TL}{_KEYBOARD_RULE}{CORNER_TR}",
            f"{prefix}{VERTICAL} {self._row(first)}{VERTICAL}",
            f"{prefix}{VERTICAL}  {self._row(second)} {VERTICAL}",
            f"{prefix}{VERTICAL}    {self._row(third)}   {VERTICAL}",
            f"{prefix}{CORNER_BL}{_KEYBOARD_RULE}{CORNER_BR}",
        ]
        return "\n".join(lines) + "\n"


def render_menu(margin: str = "") -> str:
    """Draw the options menu for choosing the word length."""
    body = [
        "            OPTIONS             ",
        " Press 1. Start 5 letter Wordle ",
        " Press 2. Start 6 letter Wordle ",
        " Press 3. Start 7 letter Wordle ",
    ]
    lines = [f"{margin}{CORNER_TL}{_MENU_RULE}{CORNER_TR}"]
    lines.extend(f"{margin}{VERTICAL}{text}{VERTICAL}" for text in body)
    lines.append(f"{margin}{CORNER_BL}{_MENU_RULE}{CORNER_BR}")
    return "\n\n\n\n" + "\n".join(lines) + "\n"


def _tint(text: str, color: LetterColor) -> str:
    code = _COLOR_CODES.get(color)
    return text if code is None else paint(text, code)


class Renderer:
    """Turns a game into the text of one screen frame."""

    def __init__(self, offset: str = "") -> None:
        self.offset = offset
        self.keyboard = Keyboard()
        self._word_msg_frames = 0
        self._length_msg_frames = 0

    def _status_line(self, game: Game, left: str) -> str:
        status = game.status()
        if status is GameStatus.WON:
            return f"{left}{self.offset}         You won!\n"
        if status is GameStatus.LOST:
            return f"{left}{self.offset}   The word was: {game.solution}\n"
        if game.invalid_word_msg:
            if self._word_msg_frames == 1:
                game.invalid_word_msg = False
                self._word_msg_frames = 0
            else:
                self._word_msg_frames += 1
            return f"{left}{self.offset} Invalid word. Try again.\n"
        if game.invalid_length_msg:
            if self._length_msg_frames == 1:
                game.invalid_length_msg = False
                self._length_msg_frames = 0
            else:
                self._length_msg_frames += 1
            return f"{left}{self.offset}    Attempt to short.\n"
        if game.show_menu:
            return render_menu(left)
        return "\n"

    def _render_row(self, game: Game, row: int, left: str) -> str:
        colors = game.letter_colors[row]
        cells = game.entered_words[row]

        top = "".join(_tint(f"{CORNER_TL}{_CELL_RULE}{CORNER_TR}", c) for c in colors)
        bottom = "".join(_tint(f"{CORNER_BL}{_CELL_RULE}{CORNER_BR}", c) for c in colors)

        middle_parts = []
        for cell, color in zip(cells, colors):
            middle_parts.append(_tint(f"{VERTICAL} {cell or ' '} {VERTICAL}", color))
            code = _COLOR_CODES.get(color)
            if code is not None:
                self.keyboard.paint_key(cell, code)
        middle = "".join(middle_parts)

        return f"{left}{top}\n{left}{middle}\n{left}{bottom}\n"

    def render(self, game: Game, margins: Margins | None = None) -> str:
        """Draw the status line, the board and the keyboard, or the menu."""
        margins = margins if margins is not None else Margins()
        left = margins.left
        parts = [margins.top, self._status_line(game, left)]
        if not game.show_menu:
            parts.extend(self._render_row(game, row, left) for row in range(game.rows))
            parts.append(self.keyboard.render(left, self.offset))
        return "".join(parts)