"""Tests for key helpers."""

import readchar

from hintmode.keys import is_backspace, is_escape, is_interrupt, is_printable


def test_escape_variants():
    assert is_escape(readchar.key.ESC)
    assert is_escape("\x1b\x1b")
    assert not is_escape("a")


def test_backspace_variants():
    assert is_backspace(readchar.key.BACKSPACE)
    assert is_backspace("\x7f")
    assert is_backspace("\b")
    assert not is_backspace("x")


def test_interrupt():
    assert is_interrupt("\x03")
    assert not is_interrupt("c")


def test_printable():
    assert is_printable("a")
    assert is_printable(";")
    assert not is_printable(" ")
    assert not is_printable(readchar.key.UP)
    assert not is_printable("\t")
