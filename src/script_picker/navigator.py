"""Two-level menu state machine: pick a category, then a script in it.

Navigation is expressed as NavEvents; turning keystrokes into events is the
terminal layer's job (see ``rich_menu.keys``).
"""

from __future__ import annotations

from dataclasses import dataclass

from .types import Catalog, MenuState, NavAction, NavEvent

UNRECOGNIZED_MESSAGE = "Unrecognized input."


@dataclass(frozen=True)
class Outcome:
    """State after handling one event, plus any transient message."""

    state: MenuState
    message: str = ""


class MenuLevel:
    """Selection over a contiguous range of items.

    ``indices`` are the ids reported back (global catalog indices), ``names``
    the matching labels used for letter jumps.

    Args:
        noun: What is being picked ("category" or "script"), for messages.
        indices: Item ids in display order.
        names: Label of each item, same order as ``indices``.
        selected: Initial selection (an id from ``indices``) or None.
    """

    def __init__(
        self,
        noun: str,
        indices: list[int] | range,
        names: list[str],
        selected: int | None = None,
    ):
        if len(indices) != len(names):
            raise ValueError("indices and names must be the same length")
        if selected is not None and selected not in indices:
            raise ValueError(f"Initial selection {selected} is outside the range")
        self.noun = noun
        self.indices = list(indices)
        self.names = list(names)
        self.selected = selected
        self.state = MenuState.BROWSING

    @property
    def _position(self) -> int | None:
        if self.selected is None:
            return None
        return self.indices.index(self.selected)

    def move(self, delta: int) -> None:
        """Step the selection, wrapping at either end."""
        if not self.indices:
            return
        pos = self._position
        if pos is None:
            pos = 0 if delta > 0 else len(self.indices) - 1
        else:
            pos = (pos + delta) % len(self.indices)
        self.selected = self.indices[pos]

    def jump(self, letter: str) -> None:
        """Select the first item whose name starts with ``letter``."""
        letter = letter.lower()
        if not letter:
            return
        for index, name in zip(self.indices, self.names):
            if name.lower().startswith(letter):
                self.selected = index
                return

    def handle(self, event: NavEvent) -> Outcome:
        """Apply one event. Terminal states ignore further events."""
        if self.state != MenuState.BROWSING:
            return Outcome(self.state)

        action = event.action
        if action == NavAction.MOVE_NEXT:
            self.move(+1)
        elif action == NavAction.MOVE_PREVIOUS:
            self.move(-1)
        elif action == NavAction.JUMP:
            self.jump(event.letter)
        elif action == NavAction.CONFIRM:
            if self.selected is None:
                return Outcome(self.state, f"Pick a {self.noun} before confirming.")
            self.state = MenuState.CONFIRMED
        elif action == NavAction.CANCEL:
            self.state = MenuState.CANCELLED
        else:
            return Outcome(self.state, UNRECOGNIZED_MESSAGE)
        return Outcome(self.state)


class Navigator:
    """Drives the category level and then the script level of a catalog."""

    def __init__(self, catalog: Catalog):
        self.catalog = catalog
        self.category_level = MenuLevel(
            "category",
            range(len(catalog.categories)),
            [category.name for category in catalog.categories],
        )
        self.script_level: MenuLevel | None = None

    @property
    def level(self) -> MenuLevel:
        """The level currently taking input."""
        return self.script_level or self.category_level

    @property
    def category_choice(self) -> int | None:
        return self.category_level.selected

    @property
    def script_choice(self) -> int | None:
        return self.script_level.selected if self.script_level else None

    @property
    def state(self) -> MenuState:
        """Overall state: cancelled at either level, confirmed at the script level."""
        if self.category_level.state == MenuState.CANCELLED:
            return MenuState.CANCELLED
        if self.script_level is None:
            return MenuState.BROWSING
        return self.script_level.state

    @property
    def done(self) -> bool:
        return self.state != MenuState.BROWSING

    def handle(self, event: NavEvent) -> Outcome:
        """Route an event to the active level, opening the script level on confirm."""
        outcome = self.level.handle(event)
        if self.script_level is None and outcome.state == MenuState.CONFIRMED:
            self._enter_script_level(self.category_level.selected)
            return Outcome(MenuState.BROWSING, outcome.message)
        return outcome

    def _enter_script_level(self, category_index: int) -> None:
        indices = self.catalog.scripts_in(category_index)
        self.script_level = MenuLevel(
            "script",
            indices,
            [self.catalog.scripts[i].name for i in indices],
            selected=indices[0] if indices else None,
        )

    def visible_scripts(self) -> list[int]:
        """Global indices of the scripts in the highlighted category."""
        if self.category_choice is None:
            return []
        return list(self.catalog.scripts_in(self.category_choice))
