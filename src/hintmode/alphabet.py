"""Ordered character sets used to build hint codes."""

from __future__ import annotations

from itertools import islice, product
from typing import Iterator

# Home row, ordered from most to least convenient.
DEFAULT_HINT_CHARS = "asdfghjkl"


class HintAlphabet:
    """An ordered set of hint characters.

    Characters earlier in the alphabet are considered easier to reach and
    end up on the most important targets.

    Args:
        chars: The characters, in preference order.

    Raises:
        ValueError: If fewer than two characters are given, a character is
            repeated, or a character is whitespace.
    """

    def __init__(self, chars: str = DEFAULT_HINT_CHARS):
        if len(chars) < 2:
            raise ValueError("Hint alphabet needs at least two characters")
        if len(set(chars)) != len(chars):
            raise ValueError(f"Hint alphabet has repeated characters: {chars!r}")
        if any(ch.isspace() for ch in chars):
            raise ValueError("Hint alphabet cannot contain whitespace")
        self._chars = chars

    @property
    def chars(self) -> str:
        return self._chars

    def __len__(self) -> int:
        return len(self._chars)

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __contains__(self, ch: object) -> bool:
        return isinstance(ch, str) and len(ch) == 1 and ch in self._chars

    def __eq__(self, other: object) -> bool:
        return isinstance(other, HintAlphabet) and other._chars == self._chars

    def __hash__(self) -> int:
        return hash(self._chars)

    def __repr__(self) -> str:
        return f"HintAlphabet({self._chars!r})"

    def capacity(self, length: int) -> int:
        """Number of distinct codes of exactly ``length`` characters."""
        return len(self._chars) ** length

    def code_length_for(self, count: int) -> int:
        """Shortest length L (at least 1) with ``len(alphabet) ** L >= count``."""
        length = 1
        while self.capacity(length) < count:
            length += 1
        return length

    def codes(self, length: int, skip: int = 0) -> Iterator[str]:
        """Yield all codes of ``length`` characters in alphabet order.

        The first character varies slowest, so for "ab" and length 2 this
        yields "aa", "ab", "ba", "bb". ``skip`` drops that many leading codes.
        """
        combos = product(self._chars, repeat=length)
        for combo in islice(combos, skip, None):
            yield "".join(combo)
