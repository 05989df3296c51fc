"""Hint-mode controller tying the registry, assigner and matcher together.

The host forwards decoded keys to ``HintNavigator.handle_key`` and acts on
the result: keep intercepting while ``consumed`` is True, and activate the
target when the outcome is RESOLVED. Routing keys between several
consumers is the host's business.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .config import NavConfig
from .hints import HintAssigner, HintSet
from .keys import is_backspace, is_escape, is_interrupt, is_printable
from .matcher import MatchOutcome, NavigationMatcher, OutcomeKind
from .registry import TargetRegistry

logger = logging.getLogger(__name__)


class NavMode(str, Enum):
    NORMAL = "normal"
    HINT = "hint"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class KeyResult:
    """What happened to one key.

    Attributes:
        consumed: True if the key was used by hint mode and should not reach
            the host application.
        outcome: Matcher outcome, when the key touched the matcher.
    """

    consumed: bool
    outcome: MatchOutcome | None = None

    @property
    def target_id(self) -> int | None:
        """Id of the chosen target when the key resolved a hint."""
        if self.outcome is not None and self.outcome.is_resolved:
            return self.outcome.target_id
        return None


NOT_HANDLED = KeyResult(consumed=False)


class HintNavigator:
    """Vimium-style "press f, type a hint" flow over a TargetRegistry.

    The registry is read only when hint mode starts. The session survives
    the per-frame ``clear()`` and re-registration until it is resolved or
    cancelled.

    Args:
        registry: The host's target registry.
        config: Navigation settings (defaults if omitted).
    """

    def __init__(self, registry: TargetRegistry, config: NavConfig | None = None):
        self.registry = registry
        self.config = config or NavConfig()
        self.assigner = HintAssigner.from_config(self.config)
        self.matcher = NavigationMatcher()

    @property
    def mode(self) -> NavMode:
        return NavMode.HINT if self.matcher.is_active else NavMode.NORMAL

    @property
    def hint_set(self) -> HintSet | None:
        return self.matcher.hint_set

    def enter_hint_mode(self) -> MatchOutcome:
        """Assign hints for the registry's current targets and start matching.

        With no eligible targets the navigator stays in NORMAL mode and the
        outcome is CANCELLED.
        """
        hint_set = self.assigner.assign(self.registry)
        if hint_set.truncated:
            logger.info("Hint mode: %d targets not shown", hint_set.omitted)
        return self.matcher.activate(hint_set)

    def exit_hint_mode(self) -> MatchOutcome:
        return self.matcher.cancel()

    def handle_key(self, key: str) -> KeyResult:
        """Process one decoded key."""
        if self.mode == NavMode.NORMAL:
            if key == self.config.hint_key:
                outcome = self.enter_hint_mode()
                return KeyResult(consumed=True, outcome=outcome)
            return NOT_HANDLED

        if is_escape(key) or is_interrupt(key):
            return KeyResult(consumed=True, outcome=self.exit_hint_mode())
        if is_backspace(key):
            return KeyResult(consumed=True, outcome=self.matcher.backspace())
        if not is_printable(key):
            # Arrows, function keys and the like are swallowed while hinting.
            outcome = MatchOutcome(OutcomeKind.NO_MATCH, candidates=tuple(self.matcher.candidates))
            return KeyResult(consumed=True, outcome=outcome)

        outcome = self.matcher.feed(key)
        if outcome.is_resolved:
            self.matcher.reset()
        return KeyResult(consumed=True, outcome=outcome)
