"""Keyboard input helpers for rich_menu.

This module provides helper functions for classifying raw keystrokes
returned by ``readchar.readkey()``, replacing repeated inline conditionals
with readable function calls.
"""

from __future__ import annotations

import readchar


def read_key() -> str:
    """Block until one keystroke (or escape sequence) arrives."""
    return readchar.readkey()


def is_enter(key: str) -> bool:
    """Check if key is Enter/Return."""
    return key in (readchar.key.ENTER, "\r", "\n")


def is_space(key: str) -> bool:
    """Check if key is space."""
    return key == " "


def is_up(key: str) -> bool:
    """Check if key is the up arrow (ESC [ A)."""
    return key in (readchar.key.UP, "\x1b[A", "\x1bOA")


def is_down(key: str) -> bool:
    """Check if key is the down arrow (ESC [ B)."""
    return key in (readchar.key.DOWN, "\x1b[B", "\x1bOB")


def letter(key: str) -> str | None:
    """Return the lowercased letter for A-Z keys, else None."""
    if len(key) == 1 and key.isascii() and key.isalpha():
        return key.lower()
    return None
