import pytest

from termwordle.game import Game, GameStatus, WordBank
from termwordle.terminal_input import classify_key
from termwordle.utils import GREEN, GREY, Margins, paint, remove_colors
from termwordle.visuals import KEY_ORDER, Keyboard, Renderer, render_menu


@pytest.fixture
def game():
    banks = {5: WordBank({"crane", "slate", "apple"}, ["crane"])}
    return Game(banks, 5)


def type_keys(game, text):
    for ch in text:
        game.handle_key(classify_key(ch))


def test_keyboard_lines_are_aligned():
    lines = remove_colors(Keyboard().render("", "").splitlines())
    assert len(lines) == 5
    assert len({len(line) for line in lines}) == 1


def test_keyboard_contains_every_letter_once():
    text = Keyboard().render()
    for letter in KEY_ORDER:
        assert text.count(letter) == 1


def test_keyboard_first_row():
    assert "Q W E R T Y U I O P" in Keyboard().render()


def test_keyboard_prefix_is_offset_then_margin():
    lines = Keyboard().render("  ", ">").splitlines()
    assert all(line.startswith(">   ") for line in lines)


def test_paint_key_colours_only_that_key():
    keyboard = Keyboard()
    keyboard.paint_key("A", GREEN)
    assert keyboard.keys["A"] == paint("A", GREEN)
    assert keyboard.keys["B"] == "B"


def test_paint_key_ignores_unknown_letters():
    keyboard = Keyboard()
    before = dict(keyboard.keys)
    keyboard.paint_key("", GREEN)
    keyboard.paint_key("_", GREEN)
    assert keyboard.keys == before


def test_render_menu_lists_options():
    menu = render_menu("")
    assert menu.startswith("\n\n\n\n")
    assert " Press 1. Start 5 letter Wordle " in menu
    assert " Press 3. Start 7 letter Wordle " in menu


def test_render_menu_uses_margin():
    lines = render_menu("xx").strip("\n").splitlines()
    assert all(line.startswith("xx") for line in lines)


def test_board_has_one_cell_per_letter(game):
    text = Renderer().render(game, Margins())
    assert text.count("╭───╮") == game.rows * game.word_length


def test_render_applies_margins(game):
    text = Renderer().render(game, Margins(top="\n\n", left="  "))
    assert text.startswith("\n\n")
    assert "  ╭───╮" in text


def test_empty_cell_drawn_as_blank(game):
    game.entered_words[0][0] = ""
    assert "│   │" in Renderer().render(game)


def test_typed_letters_appear(game):
    type_keys(game, "cr")
    text = Renderer().render(game)
    assert "│ C ││ R ││ _ │" in text


def test_scored_letters_colour_keyboard(game):
    type_keys(game, "slate\n")
    renderer = Renderer()
    text = renderer.render(game)
    assert paint("A", GREEN) in text
    assert paint("S", GREY) in text
    assert renderer.keyboard.keys["C"] == "C"


def test_invalid_word_message_shown_for_two_frames(game):
    type_keys(game, "zzzzz\n")
    assert game.invalid_word_msg
    renderer = Renderer()
    assert "Invalid word. Try again." in renderer.render(game)
    assert game.invalid_word_msg
    assert "Invalid word. Try again." in renderer.render(game)
    assert not game.invalid_word_msg
    assert "Invalid word. Try again." not in renderer.render(game)


def test_short_attempt_message(game):
    type_keys(game, "cr\n")
    renderer = Renderer()
    assert "Attempt to short." in renderer.render(game)
    renderer.render(game)
    assert not game.invalid_length_msg


def test_menu_hides_board(game):
    type_keys(game, "\t")
    text = Renderer().render(game)
    assert "OPTIONS" in text
    assert "╭───╮" not in text


def test_won_banner(game):
    type_keys(game, "crane\n")
    assert game.status() is GameStatus.WON
    assert "         You won!" in Renderer().render(game)


def test_lost_banner():
    banks = {5: WordBank({"crane", "slate"}, ["crane"])}
    game = Game(banks, 5, rows=1)
    type_keys(game, "slate\n")
    assert game.status() is GameStatus.LOST
    assert "The word was: crane" in Renderer().render(game)