"""Per-frame registry of navigable targets.

The host clears the registry at the start of every frame and registers the
targets its widgets expose. Lookups by id are O(1); spatial and attribute
queries are linear scans in insertion order.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Iterator

from .targets import SpatialTarget
from .types import Rect, TargetPriority, TargetState

logger = logging.getLogger(__name__)


class TargetRegistry:
    """Owns the current frame's targets.

    Registering a target whose id is already present replaces the old entry
    in the same slot, so insertion order stays stable for hosts that reuse
    ids across frames.
    """

    def __init__(self):
        self._targets: list[SpatialTarget] = []
        self._index: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._targets)

    def __iter__(self) -> Iterator[SpatialTarget]:
        return iter(self._targets)

    def __contains__(self, target_id: object) -> bool:
        return target_id in self._index

    def is_empty(self) -> bool:
        return not self._targets

    def all(self) -> list[SpatialTarget]:
        """All targets in insertion order."""
        return list(self._targets)

    # ── mutation ──────────────────────────────────────────────────────────

    def register(self, target: SpatialTarget) -> None:
        """Insert a target, or replace the existing one with the same id."""
        slot = self._index.get(target.id)
        if slot is not None:
            self._targets[slot] = target
            return
        self._index[target.id] = len(self._targets)
        self._targets.append(target)

    def remove(self, target_id: int) -> bool:
        """Remove a target by id.

        Returns True if a target was removed, False if the id was unknown.
        """
        slot = self._index.get(target_id)
        if slot is None:
            return False
        del self._targets[slot]
        self._rebuild_index()
        return True

    def update(self, target_id: int, **changes: Any) -> bool:
        """Replace fields of a registered target in place.

        Returns True if the target exists, False otherwise.

        Raises:
            ValueError: If ``changes`` tries to modify the id.
        """
        if "id" in changes:
            raise ValueError("Target id cannot be changed with update(); remove and register instead")
        slot = self._index.get(target_id)
        if slot is None:
            return False
        self._targets[slot] = replace(self._targets[slot], **changes)
        return True

    def clear(self) -> None:
        """Drop every target (called once at the start of each frame)."""
        if self._targets:
            logger.debug("Clearing %d targets", len(self._targets))
        self._targets.clear()
        self._index.clear()

    def _rebuild_index(self) -> None:
        self._index = {target.id: slot for slot, target in enumerate(self._targets)}

    # ── lookup ────────────────────────────────────────────────────────────

    def by_id(self, target_id: int) -> SpatialTarget | None:
        """Look up a target by id.

        The returned object is the registered instance, so the host may
        mutate it directly (its id must stay the same).
        """
        slot = self._index.get(target_id)
        if slot is None:
            return None
        return self._targets[slot]

    # ── spatial queries ───────────────────────────────────────────────────

    def at_point(self, x: int, y: int) -> list[SpatialTarget]:
        """Targets whose rect contains the cell ``(x, y)``."""
        return [t for t in self._targets if t.contains_point(x, y)]

    def in_area(self, area: Rect) -> list[SpatialTarget]:
        """Targets whose rect overlaps ``area`` by at least one cell."""
        return [t for t in self._targets if t.overlaps_rect(area)]

    def closest_to(self, x: int, y: int) -> SpatialTarget | None:
        """Target whose center is nearest to ``(x, y)``.

        Distance is Euclidean between integer cell centers; exact ties go
        to the lowest id. Degenerate targets are skipped. Returns None for
        an empty registry.
        """
        best: SpatialTarget | None = None
        best_key: tuple[int, int] | None = None
        for target in self._targets:
            if target.is_degenerate:
                continue
            cx, cy = target.center
            key = ((cx - x) ** 2 + (cy - y) ** 2, target.id)
            if best_key is None or key < best_key:
                best, best_key = target, key
        return best

    # ── attribute filters ─────────────────────────────────────────────────

    def by_priority(self, priority: TargetPriority) -> list[SpatialTarget]:
        return [t for t in self._targets if t.priority == priority]

    def by_group(self, group: str) -> list[SpatialTarget]:
        return [t for t in self._targets if t.group == group]

    def by_state(self, state: TargetState) -> list[SpatialTarget]:
        return [t for t in self._targets if t.state == state]

    def sorted_by_priority(self) -> list[SpatialTarget]:
        """Highest priority first; equal priorities by ascending id."""
        return sorted(self._targets, key=lambda t: (-t.priority, t.id))

    def sorted_by_area(self) -> list[SpatialTarget]:
        """Largest area first; equal areas by ascending id."""
        return sorted(self._targets, key=lambda t: (-t.area, t.id))
