"""Interactive picker: the Rich view and the blocking key loop.

Keys map to navigation events as follows:
    Enter           confirm
    Space / Ctrl+C  quit
    Up / Down       previous / next (wraps)
    A-Z             jump to the first entry starting with that letter
    anything else   "Unrecognized input."
"""

from __future__ import annotations

from typing import Callable

from rich.console import Console
from rich.live import Live

from rich_menu import (
    Section,
    SectionedView,
    Theme,
    is_down,
    is_enter,
    is_space,
    is_up,
    letter,
    read_key,
)

from .navigator import Navigator
from .types import Catalog, MenuState, NavAction, NavEvent

TITLE = "ScriptPicker"

KeyReader = Callable[[], str]


def key_to_event(key: str) -> NavEvent:
    """Translate one raw keystroke into a navigation event."""
    if is_enter(key):
        return NavEvent(NavAction.CONFIRM)
    if is_space(key):
        return NavEvent(NavAction.CANCEL)
    if is_up(key):
        return NavEvent(NavAction.MOVE_PREVIOUS)
    if is_down(key):
        return NavEvent(NavAction.MOVE_NEXT)
    found = letter(key)
    if found:
        return NavEvent.jump(found)
    return NavEvent(NavAction.UNKNOWN)


def instructions(noun: str) -> str:
    return (
        f"Select a {noun} by using the arrow keys or A-Z and choose it with Enter, "
        "or press spacebar to quit:"
    )


class PickerScreen:
    """Renders a Navigator's current state."""

    def __init__(self, navigator: Navigator, console: Console | None = None, theme: Theme | None = None):
        self.navigator = navigator
        self.view = SectionedView(TITLE, console=console, theme=theme)

    def render(self, message: str = ""):
        nav = self.navigator
        catalog = nav.catalog
        categories = Section(
            [category.name for category in catalog.categories],
            highlighted=nav.category_choice,
            marker=self.view.theme.category_marker,
        )

        visible = nav.visible_scripts()
        script_choice = nav.script_choice
        scripts = Section(
            [catalog.scripts[i].name for i in visible],
            highlighted=visible.index(script_choice) if script_choice in visible else None,
        )

        detail = catalog.scripts[script_choice].description if script_choice is not None else ""
        return self.view.render(instructions(nav.level.noun), [categories, scripts], detail, message)


def run_picker(
    catalog: Catalog,
    read: KeyReader = read_key,
    console: Console | None = None,
    theme: Theme | None = None,
) -> int | None:
    """Show the two-level menu until the user picks a script or quits.

    Blocks on one keystroke per iteration.

    Returns:
        Global index of the chosen script, or None if the user quit.
    """
    navigator = Navigator(catalog)
    screen = PickerScreen(navigator, console=console, theme=theme)

    with Live(screen.render(), console=screen.view.console, refresh_per_second=20, screen=False) as live:
        while not navigator.done:
            try:
                event = key_to_event(read())
            except KeyboardInterrupt:
                event = NavEvent(NavAction.CANCEL)
            outcome = navigator.handle(event)
            live.update(screen.render(outcome.message))

    if navigator.state == MenuState.CONFIRMED:
        return navigator.script_choice
    return None
