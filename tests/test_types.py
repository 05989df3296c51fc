"""Tests for shared value types."""

import pytest

from hintmode.types import ActionKind, HintPosition, Rect, TargetAction, TargetPriority, TargetState


class TestRect:
    def test_edges_and_area(self):
        rect = Rect(10, 20, 30, 40)
        assert rect.right == 40
        assert rect.bottom == 60
        assert rect.area == 1200

    def test_negative_values_rejected(self):
        with pytest.raises(ValueError):
            Rect(-1, 0, 5, 5)

    def test_center_rounds_down(self):
        assert Rect(0, 0, 10, 10).center == (5, 5)
        assert Rect(10, 20, 20, 40).center == (20, 40)
        assert Rect(0, 0, 11, 11).center == (5, 5)

    def test_contains_is_half_open(self):
        rect = Rect(10, 10, 20, 20)
        assert rect.contains(10, 10)
        assert rect.contains(29, 29)
        assert not rect.contains(30, 30)
        assert not rect.contains(30, 15)
        assert not rect.contains(15, 30)
        assert not rect.contains(9, 15)

    def test_intersects(self):
        rect = Rect(10, 10, 20, 20)
        assert rect.intersects(Rect(15, 15, 5, 5))
        assert rect.intersects(Rect(5, 5, 10, 10))
        assert rect.intersects(Rect(25, 25, 10, 10))
        assert rect.intersects(Rect(5, 5, 30, 30))
        assert not rect.intersects(Rect(50, 50, 10, 10))
        assert not rect.intersects(Rect(0, 0, 5, 5))

    def test_adjacent_rects_do_not_intersect(self):
        rect = Rect(10, 10, 20, 20)
        assert not rect.intersects(Rect(30, 10, 10, 10))
        assert not rect.intersects(Rect(10, 30, 10, 10))

    def test_empty_rects_never_intersect(self):
        assert Rect(5, 5, 0, 10).is_empty
        assert not Rect(5, 5, 0, 10).intersects(Rect(0, 0, 50, 50))
        assert not Rect(0, 0, 50, 50).intersects(Rect(5, 5, 10, 0))


class TestTargetPriority:
    def test_ordering(self):
        assert TargetPriority.CRITICAL > TargetPriority.HIGH > TargetPriority.NORMAL > TargetPriority.LOW
        shuffled = [TargetPriority.LOW, TargetPriority.CRITICAL, TargetPriority.NORMAL, TargetPriority.HIGH]
        assert sorted(shuffled) == [
            TargetPriority.LOW,
            TargetPriority.NORMAL,
            TargetPriority.HIGH,
            TargetPriority.CRITICAL,
        ]

    def test_from_string(self):
        assert TargetPriority.from_string("high") == TargetPriority.HIGH
        assert TargetPriority.from_string(" Critical ") == TargetPriority.CRITICAL

    def test_from_string_invalid(self):
        with pytest.raises(ValueError):
            TargetPriority.from_string("urgent")

    def test_str(self):
        assert str(TargetPriority.NORMAL) == "normal"


class TestTargetState:
    def test_values(self):
        assert TargetState.DISABLED.value == "disabled"
        assert str(TargetState.SELECTED) == "selected"


class TestTargetAction:
    def test_default_is_activate(self):
        assert TargetAction() == TargetAction.activate()
        assert TargetAction().kind == ActionKind.ACTIVATE

    def test_equality(self):
        assert TargetAction.select() == TargetAction.select()
        assert TargetAction.select() != TargetAction.activate()
        assert TargetAction.navigate("/home") == TargetAction.navigate("/home")
        assert TargetAction.navigate("/home") != TargetAction.navigate("/settings")

    def test_str(self):
        assert str(TargetAction.scroll()) == "scroll"
        assert str(TargetAction.custom("refresh")) == "custom:refresh"


class TestHintPosition:
    def test_from_string_accepts_dashes(self):
        assert HintPosition.from_string("top-right") == HintPosition.TOP_RIGHT
        assert HintPosition.from_string("CENTER") == HintPosition.CENTER

    def test_from_string_invalid(self):
        with pytest.raises(ValueError):
            HintPosition.from_string("middle")
