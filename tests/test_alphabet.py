"""Tests for hint alphabets."""

import pytest

from hintmode.alphabet import DEFAULT_HINT_CHARS, HintAlphabet


class TestHintAlphabet:
    def test_default_is_home_row(self):
        assert HintAlphabet().chars == DEFAULT_HINT_CHARS == "asdfghjkl"
        assert len(HintAlphabet()) == 9

    def test_rejects_short_alphabet(self):
        with pytest.raises(ValueError):
            HintAlphabet("")
        with pytest.raises(ValueError):
            HintAlphabet("a")

    def test_rejects_duplicates(self):
        with pytest.raises(ValueError):
            HintAlphabet("asa")

    def test_rejects_whitespace(self):
        with pytest.raises(ValueError):
            HintAlphabet("a s")

    def test_contains(self):
        alphabet = HintAlphabet("ab")
        assert "a" in alphabet
        assert "c" not in alphabet
        assert "ab" not in alphabet

    def test_code_length_for(self):
        alphabet = HintAlphabet("ab")
        assert alphabet.code_length_for(0) == 1
        assert alphabet.code_length_for(1) == 1
        assert alphabet.code_length_for(2) == 1
        assert alphabet.code_length_for(3) == 2
        assert alphabet.code_length_for(4) == 2
        assert alphabet.code_length_for(5) == 3

    def test_codes_in_alphabet_order(self):
        alphabet = HintAlphabet("ab")
        assert list(alphabet.codes(2)) == ["aa", "ab", "ba", "bb"]
        assert list(alphabet.codes(2, skip=2)) == ["ba", "bb"]

    def test_codes_follow_configured_order(self):
        assert list(HintAlphabet("sa").codes(1)) == ["s", "a"]

    def test_equality(self):
        assert HintAlphabet("ab") == HintAlphabet("ab")
        assert HintAlphabet("ab") != HintAlphabet("ba")
