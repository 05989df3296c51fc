"""Navigable targets registered by widget adapters each frame.

A SpatialTarget describes one rectangular region the user can jump to in
hint mode. TargetBuilder hands out sequential ids and applies the usual
presets for common widgets (buttons, list rows, tabs, tree nodes, links).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .types import Rect, TargetAction, TargetPriority, TargetState


@dataclass
class SpatialTarget:
    """A navigable rectangular region.

    Attributes:
        id: Identifier, unique within one registry generation.
        rect: Region in terminal cells.
        label: Optional display text (not used for matching).
        priority: Importance; decides who gets hints and how short they are.
        group: Optional logical group tag (e.g. "tabs").
        state: Interaction state; DISABLED targets never receive hints.
        action: What the host does when the target is chosen.
        metadata: Host-defined string data, opaque to hintmode.
    """

    id: int
    rect: Rect
    label: str | None = None
    priority: TargetPriority = TargetPriority.NORMAL
    group: str | None = None
    state: TargetState = TargetState.NORMAL
    action: TargetAction = field(default_factory=TargetAction)
    metadata: dict[str, str] = field(default_factory=dict)

    @property
    def area(self) -> int:
        return self.rect.area

    @property
    def center(self) -> tuple[int, int]:
        return self.rect.center

    @property
    def is_degenerate(self) -> bool:
        """True when the target covers no cells and can never be hit."""
        return self.rect.is_empty

    def contains_point(self, x: int, y: int) -> bool:
        return self.rect.contains(x, y)

    def overlaps_rect(self, rect: Rect) -> bool:
        return self.rect.intersects(rect)

    def with_label(self, label: str) -> SpatialTarget:
        return replace(self, label=label)

    def with_priority(self, priority: TargetPriority) -> SpatialTarget:
        return replace(self, priority=priority)

    def with_state(self, state: TargetState) -> SpatialTarget:
        return replace(self, state=state)

    def with_group(self, group: str) -> SpatialTarget:
        return replace(self, group=group)

    def with_action(self, action: TargetAction) -> SpatialTarget:
        return replace(self, action=action)

    def with_metadata(self, key: str, value: str) -> SpatialTarget:
        """Return a copy with one extra metadata entry."""
        return replace(self, metadata={**self.metadata, key: value})


class TargetBuilder:
    """Creates targets with sequential ids and widget presets.

    Example:
        builder = TargetBuilder()
        ok = builder.button(Rect(2, 10, 6, 1), "OK")       # id 1, HIGH
        row = builder.list_item(Rect(0, 3, 40, 1), "a.py")  # id 2, NORMAL
    """

    def __init__(self, start_id: int = 1):
        self._next_id = start_id

    @property
    def next_id(self) -> int:
        """Id the next built target will receive."""
        return self._next_id

    def _allocate(self) -> int:
        target_id = self._next_id
        self._next_id += 1
        return target_id

    def _build(
        self,
        rect: Rect,
        label: str,
        action: TargetAction,
        priority: TargetPriority,
        group: str | None = None,
        metadata: dict[str, str] | None = None,
    ) -> SpatialTarget:
        return SpatialTarget(
            id=self._allocate(),
            rect=rect,
            label=label,
            priority=priority,
            group=group,
            action=action,
            metadata=dict(metadata or {}),
        )

    def button(self, rect: Rect, label: str) -> SpatialTarget:
        return self._build(rect, label, TargetAction.activate(), TargetPriority.HIGH)

    def list_item(self, rect: Rect, label: str) -> SpatialTarget:
        return self._build(rect, label, TargetAction.select(), TargetPriority.NORMAL)

    def tab(self, rect: Rect, label: str) -> SpatialTarget:
        return self._build(
            rect, label, TargetAction.activate(), TargetPriority.HIGH, group="tabs"
        )

    def tree_node(self, rect: Rect, label: str, expanded: bool) -> SpatialTarget:
        """Tree row; the expansion state is kept in metadata["expanded"]."""
        return self._build(
            rect,
            label,
            TargetAction.select(),
            TargetPriority.NORMAL,
            metadata={"expanded": "true" if expanded else "false"},
        )

    def link(self, rect: Rect, label: str, path: str) -> SpatialTarget:
        return self._build(rect, label, TargetAction.navigate(path), TargetPriority.NORMAL)

    def custom(
        self,
        rect: Rect,
        label: str,
        action: TargetAction,
        priority: TargetPriority,
    ) -> SpatialTarget:
        return self._build(rect, label, action, priority)
