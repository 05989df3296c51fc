"""Decoded key helpers for hint mode.

Hosts deliver keys as the strings readchar produces; these helpers keep
terminal variations out of the navigator.
"""

from __future__ import annotations

import readchar


def is_escape(key: str) -> bool:
    """Check if key is Escape (handles terminal variations)."""
    return key in (readchar.key.ESC, "\x1b", "\x1b\x1b")


def is_backspace(key: str) -> bool:
    """Check if key is backspace (handles terminal variations)."""
    return key in (readchar.key.BACKSPACE, "\x7f", "\b")


def is_interrupt(key: str) -> bool:
    """Check if key is Ctrl+C."""
    return key == readchar.key.CTRL_C


def is_printable(key: str) -> bool:
    """Check if key is a single printable character that can extend a hint."""
    return len(key) == 1 and key.isprintable() and not key.isspace()
