import io

import pytest

from termwordle.terminal_input import KeyPress, KeyReader, classify_key


def test_escape_is_recognised():
    key = classify_key("\x1b")
    assert key.is_escape
    assert not key.is_printable


def test_tab_is_recognised():
    key = classify_key("\t")
    assert key.is_tab
    assert not key.is_enter


@pytest.mark.parametrize("ch", ["\n", "\r"])
def test_enter_keys(ch):
    key = classify_key(ch)
    assert key.is_enter
    assert not key.is_backspace


@pytest.mark.parametrize("ch", ["\x7f", "\b"])
def test_backspace_keys(ch):
    key = classify_key(ch)
    assert key.is_backspace
    assert not key.is_enter


@pytest.mark.parametrize("ch", ["a", "z", " ", "1", "~"])
def test_printable_keys(ch):
    key = classify_key(ch)
    assert key.is_printable
    assert key.char == ch
    assert not (key.is_escape or key.is_tab or key.is_enter or key.is_backspace)


@pytest.mark.parametrize("bad", ["", "ab"])
def test_classify_rejects_non_single_characters(bad):
    with pytest.raises(ValueError):
        classify_key(bad)


def test_reader_yields_keys_in_order():
    with KeyReader(io.StringIO("ab\n\x1b")) as reader:
        keys = [reader.read() for _ in range(4)]
    assert [k.char for k in keys] == ["a", "b", "\n", "\x1b"]
    assert keys[2].is_enter
    assert keys[3].is_escape


def test_reader_raises_at_end_of_input():
    reader = KeyReader(io.StringIO("x"))
    assert reader.read() == KeyPress("x")
    with pytest.raises(EOFError):
        reader.read()


def test_enter_returns_reader_and_close_is_repeatable():
    reader = KeyReader(io.StringIO("q"))
    with reader as entered:
        assert entered is reader
    reader.close()
    assert reader.read().char == "q"