"""Type definitions for script-picker.

Shared records for the catalog (categories, scripts, parameters) and the
enums driving the parser and the menu state machines.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

MAX_PARAMETERS = 5

# Slot-1 text meaning "this script takes no parameters"
NO_PARAMETERS_MARKER = "(none)"


# ── parameters ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class NoParameters:
    """The script is documented as taking no parameters."""

    takes_parameters = False

    def __iter__(self):
        return iter(())

    def __len__(self) -> int:
        return 0


@dataclass(frozen=True)
class Documented:
    """Ordered descriptions of the parameters a script takes (1..5)."""

    descriptions: tuple[str, ...]

    takes_parameters = True

    def __post_init__(self):
        if not 1 <= len(self.descriptions) <= MAX_PARAMETERS:
            raise ValueError(
                f"Documented parameters must number 1-{MAX_PARAMETERS}, "
                f"got {len(self.descriptions)}"
            )

    def __iter__(self):
        return iter(self.descriptions)

    def __len__(self) -> int:
        return len(self.descriptions)


Parameters = NoParameters | Documented


def parameters_from_slots(slots: list[str]) -> Parameters:
    """Build a Parameters value from raw comment slots.

    Empty slots are dropped. A first slot of "(none)" means no parameters.
    """
    if slots and slots[0].strip() == NO_PARAMETERS_MARKER:
        return NoParameters()
    filled = tuple(slot for slot in slots if slot)
    if not filled:
        return NoParameters()
    return Documented(filled)


# ── catalog records ───────────────────────────────────────────────────────


@dataclass(frozen=True)
class Category:
    """A named group of scripts."""

    name: str
    script_count: int = 0


@dataclass(frozen=True)
class Script:
    """One script declared in a read-me."""

    category_index: int
    name: str
    file: str
    parameters: Parameters
    description: str
    source_dir: Path = Path(".")

    @property
    def takes_parameters(self) -> bool:
        return self.parameters.takes_parameters

    @property
    def path(self) -> Path:
        """File reference resolved against the declaring read-me's directory."""
        return self.source_dir / self.file


@dataclass(frozen=True)
class ReadmeSource:
    """A read-me file and its text."""

    path: Path
    text: str

    @property
    def directory(self) -> Path:
        return self.path.parent


@dataclass(frozen=True)
class Catalog:
    """Merged, read-only catalog of categories and scripts."""

    categories: tuple[Category, ...] = ()
    scripts: tuple[Script, ...] = ()
    sources: tuple[ReadmeSource, ...] = ()

    def scripts_in(self, category_index: int) -> range:
        """Global script indices belonging to a category, in catalog order."""
        indices = [
            i for i, script in enumerate(self.scripts) if script.category_index == category_index
        ]
        if not indices:
            return range(0)
        return range(indices[0], indices[-1] + 1)

    @property
    def source_dirs(self) -> list[Path]:
        """Distinct source directories in read-me order."""
        seen: list[Path] = []
        for source in self.sources:
            if source.directory not in seen:
                seen.append(source.directory)
        return seen

    def __bool__(self) -> bool:
        return bool(self.categories)


# ── state machine enums ───────────────────────────────────────────────────


class ParserState(str, Enum):
    """Line parser states."""

    SEEKING = "seeking"
    PARAM_1 = "param1"
    PARAM_2 = "param2"
    PARAM_3 = "param3"
    PARAM_4 = "param4"
    PARAM_5 = "param5"
    DESCRIPTION = "description"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def for_slot(cls, slot: int) -> "ParserState":
        """Parameter state for a 1-based slot number."""
        return cls(f"param{slot}")

    @property
    def slot(self) -> int | None:
        """1-based parameter slot, or None outside a parameter block."""
        if self.value.startswith("param"):
            return int(self.value[len("param"):])
        return None


class MenuState(str, Enum):
    """States of one menu level."""

    BROWSING = "browsing"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"

    def __str__(self) -> str:
        return self.value


class NavAction(str, Enum):
    """Abstract navigation inputs."""

    MOVE_NEXT = "move_next"
    MOVE_PREVIOUS = "move_previous"
    JUMP = "jump"
    CONFIRM = "confirm"
    CANCEL = "cancel"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class NavEvent:
    """A navigation input, with the letter for jumps."""

    action: NavAction
    letter: str = ""

    @classmethod
    def jump(cls, letter: str) -> "NavEvent":
        return cls(NavAction.JUMP, letter)


@dataclass
class ReconcileReport:
    """Result of checking a catalog against the files on disk."""

    missing_from_disk: list[str] = field(default_factory=list)
    missing_from_catalog: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.missing_from_disk and not self.missing_from_catalog
