"""Rich-based sectioned list view and key helpers.

A small library for drawing flicker-free terminal pickers.

Example:
    from rich.live import Live
    from rich_menu import Section, SectionedView, read_key, is_enter

    view = SectionedView(title="Picker")
    with Live(view.render("Enter to pick", [Section(["a", "b"], 0)])) as live:
        key = read_key()
"""

from .keys import (
    is_down,
    is_enter,
    is_space,
    is_up,
    letter,
    read_key,
)
from .menu import Section, SectionedView
from .themes import DEFAULT_THEME, Theme

__all__ = [
    # View
    "SectionedView",
    "Section",
    # Theming
    "Theme",
    "DEFAULT_THEME",
    # Key helpers
    "read_key",
    "is_enter",
    "is_space",
    "is_up",
    "is_down",
    "letter",
]
