"""Progressive matching of typed characters against a HintSet.

The transitions are pure functions of (state, input) so they can be tested
in isolation; NavigationMatcher is a thin holder for hosts that prefer an
object with methods.

States:
    IDLE -> ACTIVE(prefix="") on activation with a non-empty HintSet
    ACTIVE -> ACTIVE(prefix + c) while more than one code (or an
        unfinished single code) remains
    ACTIVE -> RESOLVED(target_id) once the prefix equals a code
    any -> IDLE on cancel

A character that matches nothing is rejected: the prefix is left as it was
and the keystroke reports NO_MATCH.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum

from .hints import Hint, HintSet

logger = logging.getLogger(__name__)


class MatchPhase(str, Enum):
    IDLE = "idle"
    ACTIVE = "active"
    RESOLVED = "resolved"

    def __str__(self) -> str:
        return self.value


class OutcomeKind(str, Enum):
    ACTIVE = "active"
    RESOLVED = "resolved"
    NO_MATCH = "no_match"
    CANCELLED = "cancelled"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MatcherState:
    """Snapshot of a hint session.

    Attributes:
        phase: Where the session is.
        hint_set: The session's hints (None when idle).
        prefix: Characters accepted so far.
        resolved_id: Target chosen, once RESOLVED.
    """

    phase: MatchPhase = MatchPhase.IDLE
    hint_set: HintSet | None = None
    prefix: str = ""
    resolved_id: int | None = None

    @property
    def candidates(self) -> list[Hint]:
        """Hints still reachable from the current prefix (empty unless ACTIVE)."""
        if self.phase != MatchPhase.ACTIVE or self.hint_set is None:
            return []
        return self.hint_set.matching(self.prefix)


@dataclass(frozen=True)
class MatchOutcome:
    """Result of one transition.

    Attributes:
        kind: What happened.
        candidates: Hints to render after this transition (ACTIVE and
            NO_MATCH only).
        target_id: Chosen target (RESOLVED only).
    """

    kind: OutcomeKind
    candidates: tuple[Hint, ...] = ()
    target_id: int | None = None

    @property
    def is_active(self) -> bool:
        return self.kind == OutcomeKind.ACTIVE

    @property
    def is_resolved(self) -> bool:
        return self.kind == OutcomeKind.RESOLVED


IDLE_STATE = MatcherState()


def activate(hint_set: HintSet) -> tuple[MatcherState, MatchOutcome]:
    """Start a session. An empty HintSet goes straight back to IDLE."""
    if not hint_set:
        return IDLE_STATE, MatchOutcome(OutcomeKind.CANCELLED)
    state = MatcherState(phase=MatchPhase.ACTIVE, hint_set=hint_set)
    return state, MatchOutcome(OutcomeKind.ACTIVE, candidates=tuple(hint_set))


def step(state: MatcherState, char: str) -> tuple[MatcherState, MatchOutcome]:
    """Feed one typed character."""
    if state.phase != MatchPhase.ACTIVE or state.hint_set is None or len(char) != 1:
        return state, MatchOutcome(OutcomeKind.NO_MATCH, candidates=tuple(state.candidates))

    prefix = state.prefix + char
    remaining = state.hint_set.matching(prefix)
    if not remaining:
        return state, MatchOutcome(OutcomeKind.NO_MATCH, candidates=tuple(state.candidates))

    if len(remaining) == 1 and remaining[0].is_complete(prefix):
        target_id = remaining[0].target_id
        resolved = replace(state, phase=MatchPhase.RESOLVED, prefix=prefix, resolved_id=target_id)
        return resolved, MatchOutcome(OutcomeKind.RESOLVED, target_id=target_id)

    # A lone unfinished code (or a HintSet that is not prefix-free) keeps
    # the session open until the prefix is exact.
    return replace(state, prefix=prefix), MatchOutcome(OutcomeKind.ACTIVE, candidates=tuple(remaining))


def backspace(state: MatcherState) -> tuple[MatcherState, MatchOutcome]:
    """Drop the last accepted character (no-op on an empty prefix)."""
    if state.phase != MatchPhase.ACTIVE:
        return state, MatchOutcome(OutcomeKind.NO_MATCH)
    shorter = replace(state, prefix=state.prefix[:-1])
    return shorter, MatchOutcome(OutcomeKind.ACTIVE, candidates=tuple(shorter.candidates))


def cancel(state: MatcherState) -> tuple[MatcherState, MatchOutcome]:
    """End the session from any state, discarding prefix and hints."""
    return IDLE_STATE, MatchOutcome(OutcomeKind.CANCELLED)


class NavigationMatcher:
    """Mutable wrapper around the matcher transitions.

    Example:
        matcher = NavigationMatcher()
        matcher.activate(hint_set)
        outcome = matcher.feed("a")
        if outcome.is_resolved:
            host.activate(outcome.target_id)
    """

    def __init__(self):
        self.state = IDLE_STATE

    @property
    def phase(self) -> MatchPhase:
        return self.state.phase

    @property
    def is_active(self) -> bool:
        return self.state.phase == MatchPhase.ACTIVE

    @property
    def prefix(self) -> str:
        return self.state.prefix

    @property
    def hint_set(self) -> HintSet | None:
        return self.state.hint_set

    @property
    def candidates(self) -> list[Hint]:
        return self.state.candidates

    @property
    def resolved_id(self) -> int | None:
        return self.state.resolved_id

    def activate(self, hint_set: HintSet) -> MatchOutcome:
        self.state, outcome = activate(hint_set)
        logger.debug("Hint session %s with %d hints", outcome.kind, len(hint_set))
        return outcome

    def feed(self, char: str) -> MatchOutcome:
        self.state, outcome = step(self.state, char)
        if outcome.is_resolved:
            logger.debug("Hint %r resolved to target %s", self.state.prefix, outcome.target_id)
        return outcome

    def feed_text(self, text: str) -> MatchOutcome:
        """Feed several characters, stopping early on RESOLVED or NO_MATCH."""
        kind = OutcomeKind.ACTIVE if self.is_active else OutcomeKind.NO_MATCH
        outcome = MatchOutcome(kind, candidates=tuple(self.candidates))
        for char in text:
            outcome = self.feed(char)
            if outcome.kind != OutcomeKind.ACTIVE:
                break
        return outcome

    def backspace(self) -> MatchOutcome:
        self.state, outcome = backspace(self.state)
        return outcome

    def cancel(self) -> MatchOutcome:
        self.state, outcome = cancel(self.state)
        return outcome

    def reset(self) -> None:
        """Return to IDLE without reporting an outcome."""
        self.state = IDLE_STATE
