"""YAML-based configuration for hintmode.

Config file: $XDG_CONFIG_HOME/hintmode/config.yaml (default
~/.config/hintmode/config.yaml). Missing keys fall back to the defaults
below; a missing, unreadable or invalid file falls back to the defaults
entirely.

Example config.yaml:

    hint_key: f
    hint_charset: asdfghjkl
    max_hints: 0
    max_code_length: 3
    min_priority: low
    style:
      matched: bold black on green
"""

from __future__ import annotations

import copy
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .alphabet import DEFAULT_HINT_CHARS, HintAlphabet
from .labels import HintStyle
from .types import HintPosition, TargetPriority

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "hint_key": "f",
    "hint_charset": DEFAULT_HINT_CHARS,
    "max_hints": 0,  # 0 = unlimited
    "max_code_length": 3,  # 0 = unlimited
    "min_target_area": 1,
    "min_priority": "low",
    "compact_hints": False,
    "hint_position": "top_left",
    "style": asdict(HintStyle()),
}


@dataclass
class NavConfig:
    """Settings for hint generation and display.

    Attributes:
        hint_key: Key that enters hint mode.
        hint_charset: Hint characters, most convenient first.
        max_hints: Maximum hints per session (0 for unlimited).
        max_code_length: Longest hint code (0 for unlimited).
        min_target_area: Smaller targets get no hint.
        min_priority: Lower-priority targets get no hint.
        compact_hints: Give top targets shorter codes when possible.
        hint_position: Where labels sit on their target.
        style: Label styles.
    """

    hint_key: str = "f"
    hint_charset: str = DEFAULT_HINT_CHARS
    max_hints: int = 0
    max_code_length: int = 3
    min_target_area: int = 1
    min_priority: TargetPriority = TargetPriority.LOW
    compact_hints: bool = False
    hint_position: HintPosition = HintPosition.TOP_LEFT
    style: HintStyle = field(default_factory=HintStyle)

    def __post_init__(self):
        if len(self.hint_key) != 1:
            raise ValueError(f"hint_key must be a single character, got {self.hint_key!r}")
        # Validates length, duplicates and whitespace.
        HintAlphabet(self.hint_charset)
        for name in ("max_hints", "max_code_length", "min_target_area"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NavConfig":
        """Build a config from a (merged) config dict.

        Raises:
            ValueError: If a value is invalid.
        """
        style = data.get("style") or {}
        if not isinstance(style, dict):
            raise ValueError(f"style must be a mapping, got {type(style).__name__}")
        known_style = {k: str(v) for k, v in style.items() if k in HintStyle.__dataclass_fields__}
        return cls(
            hint_key=str(data.get("hint_key", "f")),
            hint_charset=str(data.get("hint_charset", DEFAULT_HINT_CHARS)),
            max_hints=data.get("max_hints", 0),
            max_code_length=data.get("max_code_length", 3),
            min_target_area=data.get("min_target_area", 1),
            min_priority=TargetPriority.from_string(str(data.get("min_priority", "low"))),
            compact_hints=bool(data.get("compact_hints", False)),
            hint_position=HintPosition.from_string(str(data.get("hint_position", "top_left"))),
            style=HintStyle(**known_style),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "hint_key": self.hint_key,
            "hint_charset": self.hint_charset,
            "max_hints": self.max_hints,
            "max_code_length": self.max_code_length,
            "min_target_area": self.min_target_area,
            "min_priority": str(self.min_priority),
            "compact_hints": self.compact_hints,
            "hint_position": str(self.hint_position),
            "style": asdict(self.style),
        }


def get_config_dir() -> Path:
    """Get the hintmode config directory."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(xdg_config) / "hintmode"


def get_config_path() -> Path:
    """Get the path to the config file."""
    return get_config_dir() / "config.yaml"


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config_dict(path: Path | None = None) -> dict[str, Any]:
    """Load the raw config merged over defaults."""
    config_path = path or get_config_path()
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return copy.deepcopy(DEFAULT_CONFIG)
    except (yaml.YAMLError, OSError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_path, e)
        return copy.deepcopy(DEFAULT_CONFIG)
    if not isinstance(data, dict):
        return copy.deepcopy(DEFAULT_CONFIG)
    return _deep_merge(copy.deepcopy(DEFAULT_CONFIG), data)


def load_config(path: Path | None = None) -> NavConfig:
    """Load the config file, falling back to defaults on invalid values."""
    data = load_config_dict(path)
    try:
        return NavConfig.from_dict(data)
    except (ValueError, TypeError) as e:
        logger.warning("Invalid hintmode config, using defaults: %s", e)
        return NavConfig()


def save_config(config: NavConfig, path: Path | None = None) -> None:
    """Write the config file."""
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
