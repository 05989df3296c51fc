"""Hint code assignment.

HintAssigner turns a snapshot of targets into a HintSet: a prefix-free,
ordered mapping from hint code to target id. Codes are as short as the
alphabet allows, and the most important targets get the earliest (and, in
compact mode, the shortest) codes.

Example:
    assigner = HintAssigner(HintAlphabet("ab"))
    hint_set = assigner.assign(registry)
    hint_set.as_dict()  # {"aa": 1, "ab": 2, "ba": 3}
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import islice
from typing import TYPE_CHECKING, Iterable, Iterator

from .alphabet import HintAlphabet
from .targets import SpatialTarget
from .types import TargetPriority, TargetState

if TYPE_CHECKING:
    from .config import NavConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Hint:
    """A hint code assigned to one target."""

    text: str
    target_id: int

    def matches(self, prefix: str) -> bool:
        """True if the code starts with ``prefix``."""
        return self.text.startswith(prefix)

    def matched(self, prefix: str) -> str:
        """Leading part of the code already typed in ``prefix``."""
        count = 0
        for typed, expected in zip(prefix, self.text):
            if typed != expected:
                break
            count += 1
        return self.text[:count]

    def unmatched(self, prefix: str) -> str:
        """Part of the code still to be typed after ``prefix``."""
        return self.text[len(self.matched(prefix)):]

    def is_complete(self, prefix: str) -> bool:
        return self.text == prefix


@dataclass
class HintSet:
    """Ordered hint codes for one hint-mode session.

    Hints are kept in assignment order (most important target first).

    Attributes:
        hints: The assigned hints.
        truncated: True when eligible targets were left without a hint.
        omitted: How many eligible targets were left out.
    """

    hints: tuple[Hint, ...] = ()
    truncated: bool = False
    omitted: int = 0
    _by_code: dict[str, Hint] = field(init=False, repr=False, compare=False)
    _by_target: dict[int, Hint] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        self.hints = tuple(self.hints)
        self._by_code = {hint.text: hint for hint in self.hints}
        self._by_target = {hint.target_id: hint for hint in self.hints}

    def __len__(self) -> int:
        return len(self.hints)

    def __iter__(self) -> Iterator[Hint]:
        return iter(self.hints)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __bool__(self) -> bool:
        return bool(self.hints)

    def codes(self) -> list[str]:
        return [hint.text for hint in self.hints]

    def as_dict(self) -> dict[str, int]:
        """Code to target id, in assignment order."""
        return {hint.text: hint.target_id for hint in self.hints}

    def target_for(self, code: str) -> int | None:
        hint = self._by_code.get(code)
        return hint.target_id if hint else None

    def hint_for_target(self, target_id: int) -> Hint | None:
        return self._by_target.get(target_id)

    def matching(self, prefix: str) -> list[Hint]:
        """Hints whose code starts with ``prefix`` (assignment order)."""
        return [hint for hint in self.hints if hint.matches(prefix)]

    def non_matching(self, prefix: str) -> list[Hint]:
        """Hints ruled out by ``prefix``; renderers dim these."""
        return [hint for hint in self.hints if not hint.matches(prefix)]


def is_prefix_free(codes: Iterable[str]) -> bool:
    """True if the codes are distinct and none is a prefix of another."""
    ordered = sorted(codes)
    for current, following in zip(ordered, ordered[1:]):
        if following.startswith(current):
            return False
    return True


def hint_order_key(target: SpatialTarget) -> tuple[int, int]:
    """Sort key: highest priority first, then ascending id."""
    return (-target.priority, target.id)


class HintAssigner:
    """Assigns prefix-free hint codes to targets.

    Args:
        alphabet: Characters to build codes from, in preference order.
        max_hints: Maximum number of hints (0 for unlimited).
        max_code_length: Longest code allowed (0 for unlimited). Targets
            beyond ``len(alphabet) ** max_code_length`` are left out.
        min_target_area: Targets with a smaller area get no hint.
        min_priority: Targets below this priority get no hint.
        compact: Give the top targets one-character-shorter codes when the
            remaining targets still fit (Vimium-style). When False every
            code in a set has the same length.

    Raises:
        ValueError: If a limit is negative.
    """

    def __init__(
        self,
        alphabet: HintAlphabet | None = None,
        max_hints: int = 0,
        max_code_length: int = 3,
        min_target_area: int = 1,
        min_priority: TargetPriority = TargetPriority.LOW,
        compact: bool = False,
    ):
        if max_hints < 0:
            raise ValueError(f"max_hints must be >= 0, got {max_hints}")
        if max_code_length < 0:
            raise ValueError(f"max_code_length must be >= 0, got {max_code_length}")
        if min_target_area < 0:
            raise ValueError(f"min_target_area must be >= 0, got {min_target_area}")
        self.alphabet = alphabet or HintAlphabet()
        self.max_hints = max_hints
        self.max_code_length = max_code_length
        self.min_target_area = min_target_area
        self.min_priority = TargetPriority(min_priority)
        self.compact = compact

    @classmethod
    def from_config(cls, config: NavConfig) -> "HintAssigner":
        return cls(
            alphabet=HintAlphabet(config.hint_charset),
            max_hints=config.max_hints,
            max_code_length=config.max_code_length,
            min_target_area=config.min_target_area,
            min_priority=config.min_priority,
            compact=config.compact_hints,
        )

    @property
    def capacity(self) -> int | None:
        """Most hints a single set can hold, or None when unbounded."""
        limits = []
        if self.max_hints:
            limits.append(self.max_hints)
        if self.max_code_length:
            limits.append(self.alphabet.capacity(self.max_code_length))
        return min(limits) if limits else None

    def is_eligible(self, target: SpatialTarget) -> bool:
        return (
            target.state != TargetState.DISABLED
            and target.area >= self.min_target_area
            and not target.is_degenerate
            and target.priority >= self.min_priority
        )

    def select_candidates(
        self, targets: Iterable[SpatialTarget]
    ) -> tuple[list[SpatialTarget], int]:
        """Pick the targets that will receive hints.

        Returns:
            Tuple of (candidates in hint order, number of eligible targets
            that did not fit).
        """
        eligible = sorted((t for t in targets if self.is_eligible(t)), key=hint_order_key)
        limit = self.capacity
        if limit is None or len(eligible) <= limit:
            return eligible, 0

        omitted = len(eligible) - limit
        if self.max_code_length and limit == self.alphabet.capacity(self.max_code_length):
            logger.warning(
                "%d targets exceed hint capacity (%d codes of up to %d chars); %d not shown",
                len(eligible),
                limit,
                self.max_code_length,
                omitted,
            )
        else:
            logger.debug("Limiting hints to %d of %d targets", limit, len(eligible))
        return eligible[:limit], omitted

    def assign(self, targets: Iterable[SpatialTarget]) -> HintSet:
        """Build the HintSet for a snapshot of targets.

        ``targets`` is usually the TargetRegistry itself. Zero eligible
        targets produce an empty HintSet.
        """
        candidates, omitted = self.select_candidates(targets)
        codes = self.generate_codes(len(candidates))
        hints = tuple(Hint(code, target.id) for code, target in zip(codes, candidates))
        logger.debug("Assigned %d hints (%d omitted)", len(hints), omitted)
        return HintSet(hints=hints, truncated=omitted > 0, omitted=omitted)

    def generate_codes(self, count: int) -> list[str]:
        """Return ``count`` prefix-free codes in preference order."""
        if count <= 0:
            return []
        length = self.alphabet.code_length_for(count)
        if not self.compact or length == 1:
            return list(islice(self.alphabet.codes(length), count))

        width = len(self.alphabet)
        short = self._short_code_count(count, length)
        short_codes = list(islice(self.alphabet.codes(length - 1), short))
        # Long codes live under the prefixes the short codes did not take.
        long_codes = islice(self.alphabet.codes(length, skip=short * width), count - short)
        return short_codes + list(long_codes)

    def _short_code_count(self, count: int, length: int) -> int:
        """How many codes of ``length - 1`` chars fit alongside the rest.

        Each short code occupies a whole prefix, so the remaining targets
        must fit into the other prefixes: s + ceil((count - s) / k) <= k ** (L - 1).
        """
        width = len(self.alphabet)
        prefixes = self.alphabet.capacity(length - 1)
        spare = self.alphabet.capacity(length) - count
        return min(spare // (width - 1), prefixes, count)
