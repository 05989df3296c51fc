"""Pytest fixtures for hintmode tests."""

import pytest

from hintmode.registry import TargetRegistry
from hintmode.targets import SpatialTarget
from hintmode.types import Rect, TargetPriority, TargetState


def make_target(
    target_id,
    rect=None,
    priority=TargetPriority.NORMAL,
    state=TargetState.NORMAL,
    **kwargs,
):
    """Build a target on its own row unless a rect is given."""
    if rect is None:
        rect = Rect(0, target_id * 2, 10, 1)
    return SpatialTarget(target_id, rect, priority=priority, state=state, **kwargs)


@pytest.fixture
def registry():
    return TargetRegistry()


@pytest.fixture
def filled_registry(registry):
    """Three stacked buttons with mixed priorities."""
    registry.register(make_target(1, Rect(5, 5, 20, 3), TargetPriority.HIGH, label="Button 1"))
    registry.register(make_target(2, Rect(5, 10, 20, 3), label="Button 2"))
    registry.register(make_target(3, Rect(5, 15, 20, 3), label="Button 3"))
    return registry
