"""Type definitions for hintmode.

Shared value types (rectangles, enums) used by the registry, the hint
assigner and the matcher.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


@dataclass(frozen=True)
class Rect:
    """Rectangle in terminal cell coordinates.

    Attributes:
        x: Left column.
        y: Top row.
        width: Number of columns (>= 0).
        height: Number of rows (>= 0).
    """

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self):
        if self.x < 0 or self.y < 0 or self.width < 0 or self.height < 0:
            raise ValueError(f"Rect values must be non-negative: {self!r}")

    @property
    def right(self) -> int:
        """First column past the right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """First row past the bottom edge."""
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        """True when the rect has no cells (zero width or zero height)."""
        return self.width == 0 or self.height == 0

    @property
    def center(self) -> tuple[int, int]:
        """Center cell, rounded down."""
        return (self.x + self.width // 2, self.y + self.height // 2)

    def contains(self, x: int, y: int) -> bool:
        """Half-open point test: left/top inclusive, right/bottom exclusive."""
        return self.x <= x < self.right and self.y <= y < self.bottom

    def intersects(self, other: Rect) -> bool:
        """Axis-aligned overlap test. Empty rects never intersect anything."""
        if self.is_empty or other.is_empty:
            return False
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )


class TargetPriority(IntEnum):
    """Importance of a target. Higher values get shorter hints."""

    LOW = 0
    NORMAL = 1
    HIGH = 2
    CRITICAL = 3

    def __str__(self) -> str:
        return self.name.lower()

    @classmethod
    def from_string(cls, value: str) -> "TargetPriority":
        """Parse a priority name (case-insensitive).

        Raises:
            ValueError: If the name is unknown.
        """
        try:
            return cls[value.strip().upper()]
        except KeyError:
            valid = ", ".join(str(p) for p in cls)
            raise ValueError(f"Unknown priority: {value!r} (expected one of {valid})") from None


class TargetState(str, Enum):
    """Visual/interaction state of a target."""

    NORMAL = "normal"
    HIGHLIGHTED = "highlighted"
    SELECTED = "selected"
    DISABLED = "disabled"

    def __str__(self) -> str:
        return self.value


class ActionKind(str, Enum):
    """What the host should do when a target is activated."""

    ACTIVATE = "activate"
    SELECT = "select"
    SCROLL = "scroll"
    NAVIGATE = "navigate"
    CUSTOM = "custom"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TargetAction:
    """Action attached to a target.

    NAVIGATE carries a path and CUSTOM carries a command name in
    ``argument``; the other kinds carry nothing.
    """

    kind: ActionKind = ActionKind.ACTIVATE
    argument: str | None = None

    @classmethod
    def activate(cls) -> "TargetAction":
        return cls(ActionKind.ACTIVATE)

    @classmethod
    def select(cls) -> "TargetAction":
        return cls(ActionKind.SELECT)

    @classmethod
    def scroll(cls) -> "TargetAction":
        return cls(ActionKind.SCROLL)

    @classmethod
    def navigate(cls, path: str) -> "TargetAction":
        return cls(ActionKind.NAVIGATE, path)

    @classmethod
    def custom(cls, name: str) -> "TargetAction":
        return cls(ActionKind.CUSTOM, name)

    def __str__(self) -> str:
        if self.argument is None:
            return str(self.kind)
        return f"{self.kind}:{self.argument}"


class HintPosition(str, Enum):
    """Where a hint label sits relative to its target."""

    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    CENTER = "center"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, value: str) -> "HintPosition":
        """Parse a position name such as ``"top-left"`` or ``"center"``.

        Raises:
            ValueError: If the name is unknown.
        """
        normalized = value.strip().lower().replace("-", "_")
        for position in cls:
            if position.value == normalized:
                return position
        valid = ", ".join(p.value for p in cls)
        raise ValueError(f"Unknown hint position: {value!r} (expected one of {valid})")
