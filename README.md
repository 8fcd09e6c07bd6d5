# termwordle

Wordle in your terminal. You have six tries to guess the hidden word. After
each guess the tiles are coloured to show how close you were:

- **green**: the letter is in the word and in the right place
- **yellow**: the letter is in the word but in another place
- **grey**: the letter is not in the word

Below the board, an on-screen keyboard shows the colour each letter has
earned so far. You can play with words of 5, 6 or 7 letters.

## Installing

```
pip install .
```

## Word lists

The package has no word lists of its own. You give it one or more plain text
files with one word per line:

- Blank lines are skipped.
- Lines that start with `#` are skipped.
- Words are lower-cased.
- A line that is not made only of ASCII letters is an error.

Words are grouped by their length. Every word in a file counts both as a
guess you may enter and as a possible answer. If you give several files,
their words are merged.

## Playing

```
termwordle WORDS.txt [MORE_WORDS.txt ...] [--length {5,6,7}] [--seed N]
```

- `--length` sets the word length of the first game. The default is 5. The
  word lists must contain words of that length.
- `--seed` seeds the random choice of the answer, so a game can be repeated.

| Key         | Action                                     |
|-------------|--------------------------------------------|
| `a`–`z`     | type a letter into the current row         |
| Space       | skip to the next cell                      |
| Backspace   | step back one cell                         |
| Enter       | submit the row as a guess                  |
| Tab         | open or close the options menu             |
| `1` `2` `3` | in the menu: start a 5, 6 or 7 letter game |
| Escape      | quit                                       |

A guess is accepted only when the row is full and the word is in the word
list. Otherwise a short message ("Invalid word. Try again." or "Attempt to
short.") appears above the board for a couple of frames.

Menu choices need word lists that contain words of the chosen length.

The game ends when you:

- guess the word,
- use up all six rows,
- press Escape, or
- reach the end of input.

When the output is a terminal, the screen is cleared and the board is
centred for each frame. Otherwise, frames are written one after another with
no margins.

## Using it as a library

- `termwordle.game.score_guess(attempt, solution)` returns a `LetterColor`
  for each position of the guess. Repeated letters are handled the way Wordle
  handles them.
- `termwordle.game.WordBank(acceptable, answers)` holds the words accepted as
  guesses and the possible answers. `random_word(rng)` picks an answer.
- `termwordle.game.Game(banks, word_length, rows, rng)` holds the board.
  - `banks` maps word lengths to word banks.
  - `handle_key(key)` applies one `KeyPress`.
  - `try_guess()` raises `InvalidGuessError` for words that are not in the
    list.
  - `status()` returns a `GameStatus`: `PLAYING`, `WON` or `LOST`.
- `termwordle.terminal_input.KeyReader(stream)` is a context manager. While it
  is open it turns off line buffering and echo on a terminal. `read()`
  returns one `KeyPress` and raises `EOFError` at the end of input.
- `termwordle.visuals.Renderer().render(game, margins)` draws one frame as a
  string. `Keyboard` and `render_menu(margin)` draw the keyboard and the
  options menu.
- `termwordle.utils` provides:
  - `paint` and `remove_colors` for ANSI colours,
  - `array_to_representation` for a boxed row of cells,
  - `compute_margins` and `terminal_margins` for layout.
- `termwordle.main.load_word_bank(path)` reads a word list into banks keyed
  by word length.
- `termwordle.main.run(game, reader, renderer, out)` drives the game loop
  and returns the final `GameStatus`.

## Running the tests

```
pip install ".[test]"
pytest
```