"""Configurable themes for rich_menu views.

This module provides theming support for menu styling. The Theme dataclass
holds all configurable visual elements (colors, dividers, layout).
"""

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for the sectioned list view.

    All colors use Rich markup format (e.g., "green", "bold cyan", "dim").

    Attributes:
        highlight_style: Style for the highlighted entry of each section.
        dim_color: Color for instructions and secondary text.
        message_color: Color for transient messages.
        border_color: Color for panel border.

        divider: Line drawn between sections.
        category_marker: Text wrapped around section-one entries ("-Name-").

        panel_width: Fixed width of the menu panel.
    """

    # Colors
    highlight_style: str = "reverse"
    dim_color: str = "dim"
    message_color: str = "yellow"
    border_color: str = "cyan"

    # Decorations
    divider: str = "-" * 40
    category_marker: str = "-"

    # Layout
    panel_width: int = 100


# Default theme used when none is specified
DEFAULT_THEME = Theme()
