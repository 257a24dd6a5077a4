"""Sectioned list view rendered with Rich.

Draws a panel holding an instruction line, any number of stacked list
sections (each with at most one highlighted entry) separated by dividers,
a detail paragraph and a transient message line. The view only renders;
the caller owns the input loop and updates a ``rich.live.Live`` with
``render()`` after every keystroke.

Example:
    from rich_menu import Section, SectionedView

    view = SectionedView(title="Picker")
    panel = view.render(
        "Pick one with Enter",
        [Section(["alpha", "beta"], highlighted=1)],
        detail="Beta does things.",
    )
"""

from __future__ import annotations

from dataclasses import dataclass, field

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from .themes import DEFAULT_THEME, Theme


@dataclass
class Section:
    """One list block of the view.

    Attributes:
        items: Entry labels in display order.
        highlighted: Position of the highlighted entry, or None.
        marker: Text placed on both sides of every label (e.g. "-").
    """

    items: list[str] = field(default_factory=list)
    highlighted: int | None = None
    marker: str = ""

    def render_lines(self, theme: Theme = DEFAULT_THEME) -> list[str]:
        lines = []
        for i, label in enumerate(self.items):
            text = escape(f"{self.marker}{label}{self.marker}")
            if i == self.highlighted:
                text = f"[{theme.highlight_style}]{text}[/{theme.highlight_style}]"
            lines.append(text)
        return lines


class SectionedView:
    """Panel with stacked sections, a detail paragraph and a message line.

    Args:
        title: Panel title.
        console: Rich Console (auto-created if not provided).
        theme: Visual theme for styling.
    """

    def __init__(self, title: str, console: Console | None = None, theme: Theme | None = None):
        self.title = title
        self.console = console or Console()
        self.theme = theme or DEFAULT_THEME

    def render(
        self,
        instructions: str,
        sections: list[Section],
        detail: str = "",
        message: str = "",
    ) -> Panel:
        """Render the whole view as a Rich Panel."""
        theme = self.theme
        lines = [f"[{theme.dim_color}]{escape(instructions)}[/{theme.dim_color}]", ""]

        for section in sections:
            lines.extend(section.render_lines(theme))
            lines.append(theme.divider)

        if detail:
            lines.append(escape(detail))

        if message:
            lines.append("")
            lines.append(f"[{theme.message_color}]{escape(message)}[/{theme.message_color}]")

        return Panel(
            "\n".join(lines),
            title=f"[bold]{escape(self.title)}[/bold]",
            border_style=theme.border_color,
            width=min(theme.panel_width, self.console.width),
        )
