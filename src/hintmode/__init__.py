"""Keyboard hint navigation for terminal UIs.

Hosts register the regions their widgets draw each frame; hintmode assigns
short prefix-free codes to them and resolves typed input to a single
target.

Example:
    from hintmode import HintNavigator, Rect, SpatialTarget, TargetRegistry

    registry = TargetRegistry()
    navigator = HintNavigator(registry)

    # every frame
    registry.clear()
    registry.register(SpatialTarget(1, Rect(0, 0, 20, 1), label="Open"))

    # every key
    result = navigator.handle_key(key)
    if result.target_id is not None:
        activate(result.target_id)
"""

from .alphabet import DEFAULT_HINT_CHARS, HintAlphabet
from .config import NavConfig, load_config, save_config
from .hints import Hint, HintAssigner, HintSet, is_prefix_free
from .labels import DEFAULT_HINT_STYLE, HintStyle, banner_text, hint_area, hint_label
from .matcher import (
    MatcherState,
    MatchOutcome,
    MatchPhase,
    NavigationMatcher,
    OutcomeKind,
)
from .registry import TargetRegistry
from .session import HintNavigator, KeyResult, NavMode
from .targets import SpatialTarget, TargetBuilder
from .types import (
    ActionKind,
    HintPosition,
    Rect,
    TargetAction,
    TargetPriority,
    TargetState,
)

__version__ = "0.1.0"

__all__ = [
    # Targets
    "Rect",
    "SpatialTarget",
    "TargetBuilder",
    "TargetRegistry",
    "TargetPriority",
    "TargetState",
    "TargetAction",
    "ActionKind",
    # Hints
    "HintAlphabet",
    "DEFAULT_HINT_CHARS",
    "Hint",
    "HintSet",
    "HintAssigner",
    "is_prefix_free",
    # Matching
    "NavigationMatcher",
    "MatcherState",
    "MatchOutcome",
    "MatchPhase",
    "OutcomeKind",
    "HintNavigator",
    "KeyResult",
    "NavMode",
    # Labels
    "HintPosition",
    "HintStyle",
    "DEFAULT_HINT_STYLE",
    "hint_area",
    "hint_label",
    "banner_text",
    # Config
    "NavConfig",
    "load_config",
    "save_config",
]
