"""Hint label placement and styling for the rendering layer.

Nothing in this module draws to the terminal: it computes where a hint
label goes and returns Rich ``Text`` for the renderer to place.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.text import Text

from .hints import Hint, HintSet
from .types import HintPosition, Rect


@dataclass(frozen=True)
class HintStyle:
    """Rich style strings for hint labels.

    Attributes:
        background: Padding around the code.
        text: Characters still to be typed.
        matched: Characters already typed.
        dimmed: Hints ruled out by the current prefix.
        banner: Status banner shown while hint mode is active.
    """

    background: str = "bold black on yellow"
    text: str = "bold black on yellow"
    matched: str = "bold black on green"
    dimmed: str = "dim bright_black on grey70"
    banner: str = "bold yellow"


DEFAULT_HINT_STYLE = HintStyle()


def _sub(a: int, b: int) -> int:
    return max(a - b, 0)


def hint_area(
    target: Rect,
    code: str,
    frame: Rect,
    position: HintPosition = HintPosition.TOP_LEFT,
    padding: tuple[int, int] = (1, 0),
) -> Rect:
    """Cells a hint label occupies for a target, clamped to the frame.

    Args:
        target: The target's rect.
        code: The hint code being drawn.
        frame: Visible area; the label never extends past it.
        position: Anchor relative to the target.
        padding: (horizontal, vertical) padding around the code.

    Returns:
        The label rect. Its width or height is 0 when the frame has no
        room for it.
    """
    pad_x, pad_y = padding
    width = len(code) + pad_x * 2
    height = 1 + pad_y * 2

    if position == HintPosition.TOP_RIGHT:
        x, y = target.x + _sub(target.width, width), target.y
    elif position == HintPosition.CENTER:
        x = target.x + _sub(target.width, width) // 2
        y = target.y + _sub(target.height, height) // 2
    elif position == HintPosition.BOTTOM_LEFT:
        x, y = target.x, target.y + _sub(target.height, height)
    elif position == HintPosition.BOTTOM_RIGHT:
        x = target.x + _sub(target.width, width)
        y = target.y + _sub(target.height, height)
    else:
        x, y = target.x, target.y

    x = max(min(x, _sub(frame.right, width)), frame.x)
    y = max(min(y, _sub(frame.bottom, height)), frame.y)
    return Rect(x, y, min(width, _sub(frame.right, x)), min(height, _sub(frame.bottom, y)))


def hint_label(
    hint: Hint,
    prefix: str = "",
    style: HintStyle = DEFAULT_HINT_STYLE,
    padding: int = 1,
) -> Text:
    """Styled label for one hint given what has been typed so far."""
    label = Text()
    pad = " " * padding
    if pad:
        label.append(pad, style=style.background)
    if hint.matches(prefix):
        matched = hint.matched(prefix)
        if matched:
            label.append(matched, style=style.matched)
        unmatched = hint.unmatched(prefix)
        if unmatched:
            label.append(unmatched, style=style.text)
    else:
        label.append(hint.text, style=style.dimmed)
    if pad:
        label.append(pad, style=style.background)
    return label


def banner_text(hint_set: HintSet, prefix: str = "", style: HintStyle = DEFAULT_HINT_STYLE) -> Text:
    """One-line status for the top of the screen while hint mode is active."""
    total = len(hint_set)
    if prefix:
        message = f" Hint mode: {prefix} [{len(hint_set.matching(prefix))}/{total}] "
    else:
        message = f" Hint mode: {total} targets (press Esc to exit) "
    banner = Text(message, style=style.banner)
    if hint_set.truncated:
        banner.append(f"(+{hint_set.omitted} not shown) ", style=style.dimmed)
    return banner
