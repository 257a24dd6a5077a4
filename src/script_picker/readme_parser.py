"""Parse a script read-me into catalog records.

The read-me is ordinary Markdown that also carries the catalog:

    # My Scripts
    Free text, ignored.

    ## Contents
    [Utilities](#utilities)

    ## Utilities
    ### [Backup](backup.sh)
    <!--Directory to back up.
    Destination directory.-->
    Copies a directory somewhere safe.

The first ``##`` section is the table of contents and is skipped. Every later
``##`` heading opens a category, every ``### [Label](file)`` heading declares a
script, the HTML comment right after it lists up to five parameters (or
``(none)``), and the line after the comment is the script's description.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Union

from .errors import ReadmeFormatError, TooManyParametersError
from .types import (
    MAX_PARAMETERS,
    Category,
    ParserState,
    Script,
    parameters_from_slots,
)

logger = logging.getLogger(__name__)

CATEGORY_PREFIX = "## "
SCRIPT_PREFIX = "### "
COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"

# Matches: ### [Label](target)
_SCRIPT_HEADING_RE = re.compile(r"^###\s+\[(?P<name>[^\]]*)\]\((?P<file>[^)]*)\)")


# ── fragments produced by state transitions ──────────────────────────────


@dataclass(frozen=True)
class CategoryOpened:
    name: str


@dataclass(frozen=True)
class ScriptOpened:
    name: str
    file: str


@dataclass(frozen=True)
class ParameterRead:
    text: str
    closed: bool


@dataclass(frozen=True)
class DescriptionRead:
    text: str


Fragment = Union[CategoryOpened, ScriptOpened, ParameterRead, DescriptionRead]
Transition = tuple[ParserState, Union[Fragment, None]]


@dataclass
class ParsedReadme:
    """Categories and scripts from a single read-me (indices local to it)."""

    categories: list[Category] = field(default_factory=list)
    scripts: list[Script] = field(default_factory=list)


# ── transitions ───────────────────────────────────────────────────────────


def _seek(line: str, line_number: int, state: ParserState) -> Transition:
    """Look for category and script headings; ignore everything else."""
    if line.startswith(CATEGORY_PREFIX):
        return ParserState.SEEKING, CategoryOpened(line[len(CATEGORY_PREFIX):].strip())

    if line.startswith(SCRIPT_PREFIX):
        m = _SCRIPT_HEADING_RE.match(line)
        if not m:
            raise ReadmeFormatError(
                "Script heading must look like '### [Name](file)'", line_number, line
            )
        return ParserState.PARAM_1, ScriptOpened(m.group("name").strip(), m.group("file").strip())

    return ParserState.SEEKING, None


def _read_parameter(line: str, line_number: int, state: ParserState) -> Transition:
    """Read one line of the parameter comment into the current slot."""
    slot = state.slot
    if slot == 1 and COMMENT_OPEN not in line:
        raise ReadmeFormatError(
            "Did not find start of parameter listing where it was expected",
            line_number,
            line,
        )
    if line.startswith((CATEGORY_PREFIX, SCRIPT_PREFIX)):
        raise ReadmeFormatError(
            "Heading inside an unclosed parameter comment", line_number, line
        )

    text = line.replace(COMMENT_OPEN, "").replace(COMMENT_CLOSE, "").strip()
    closed = COMMENT_CLOSE in line
    if closed:
        return ParserState.DESCRIPTION, ParameterRead(text, closed=True)

    if slot == MAX_PARAMETERS:
        raise TooManyParametersError(
            f"Too many parameters (at most {MAX_PARAMETERS})", line_number, line
        )
    return ParserState.for_slot(slot + 1), ParameterRead(text, closed=False)


def _read_description(line: str, line_number: int, state: ParserState) -> Transition:
    return ParserState.SEEKING, DescriptionRead(line)


_TRANSITIONS: dict[ParserState, Callable[[str, int, ParserState], Transition]] = {
    ParserState.SEEKING: _seek,
    ParserState.PARAM_1: _read_parameter,
    ParserState.PARAM_2: _read_parameter,
    ParserState.PARAM_3: _read_parameter,
    ParserState.PARAM_4: _read_parameter,
    ParserState.PARAM_5: _read_parameter,
    ParserState.DESCRIPTION: _read_description,
}


# ── accumulation ──────────────────────────────────────────────────────────


class _ReadmeBuilder:
    """Collects fragments into categories and scripts for one read-me."""

    def __init__(self, source_dir: Path):
        self.source_dir = source_dir
        self.seen_contents = False
        self.category_names: list[str] = []
        self.counts: list[int] = []
        self.scripts: list[Script] = []
        self._pending: ScriptOpened | None = None
        self._pending_category = -1
        self._slots: list[str] = []

    @property
    def pending_name(self) -> str | None:
        return self._pending.name if self._pending else None

    def apply(self, fragment: Fragment, line_number: int, line: str) -> None:
        if isinstance(fragment, CategoryOpened):
            if not self.seen_contents:
                # First "##" section is the table of contents
                self.seen_contents = True
                return
            self.category_names.append(fragment.name)
            self.counts.append(0)

        elif isinstance(fragment, ScriptOpened):
            if not self.category_names:
                raise ReadmeFormatError(
                    "Script declared before any category", line_number, line
                )
            self._pending = fragment
            self._pending_category = len(self.category_names) - 1
            self.counts[self._pending_category] += 1
            self._slots = []

        elif isinstance(fragment, ParameterRead):
            self._slots.append(fragment.text)

        elif isinstance(fragment, DescriptionRead):
            assert self._pending is not None
            self.scripts.append(
                Script(
                    category_index=self._pending_category,
                    name=self._pending.name,
                    file=self._pending.file,
                    parameters=parameters_from_slots(self._slots),
                    description=fragment.text,
                    source_dir=self.source_dir,
                )
            )
            self._pending = None
            self._slots = []

    def build(self) -> ParsedReadme:
        categories = [
            Category(name=name, script_count=count)
            for name, count in zip(self.category_names, self.counts)
        ]
        return ParsedReadme(categories=categories, scripts=self.scripts)


def parse_readme(text: str, source_dir: Path | None = None) -> ParsedReadme:
    """Parse read-me text into categories and scripts.

    Lines are consumed strictly in order with no look-ahead. Blank lines
    carry no meaning and are skipped.

    Args:
        text: Full read-me contents.
        source_dir: Directory the read-me lives in; stored on every script.

    Returns:
        ParsedReadme with category indices starting at 0.

    Raises:
        ReadmeFormatError: A script heading is not followed by a parameter
            comment, is malformed, precedes every category, or the file ends
            part-way through a script.
        TooManyParametersError: A parameter comment has more than five lines.
    """
    builder = _ReadmeBuilder(source_dir if source_dir is not None else Path("."))
    state = ParserState.SEEKING
    line_number = 0
    line = ""

    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        state, fragment = _TRANSITIONS[state](line, line_number, state)
        if fragment is not None:
            builder.apply(fragment, line_number, line)

    if state != ParserState.SEEKING:
        raise ReadmeFormatError(
            f"Read-me ended in the middle of script '{builder.pending_name}'",
            line_number,
            line,
        )

    parsed = builder.build()
    logger.debug(
        "Parsed %d categories and %d scripts from read-me in %s",
        len(parsed.categories),
        len(parsed.scripts),
        builder.source_dir,
    )
    return parsed


def render_readme(categories: list[Category], scripts: list[Script], title: str = "Scripts") -> str:
    """Write categories and scripts back out in read-me form.

    The output parses back to the same catalog.
    """
    lines = [f"# {title}", "", "## Contents"]
    for category in categories:
        lines.append(f"[{category.name}](#{category.name.lower().replace(' ', '-')})")
    lines.append("")

    for index, category in enumerate(categories):
        lines.append(f"{CATEGORY_PREFIX}{category.name}")
        for script in scripts:
            if script.category_index != index:
                continue
            lines.append(f"{SCRIPT_PREFIX}[{script.name}]({script.file})")
            params = list(script.parameters) or ["(none)"]
            if len(params) == 1:
                lines.append(f"{COMMENT_OPEN}{params[0]}{COMMENT_CLOSE}")
            else:
                lines.append(f"{COMMENT_OPEN}{params[0]}")
                lines.extend(params[1:-1])
                lines.append(f"{params[-1]}{COMMENT_CLOSE}")
            lines.append(script.description)
            lines.append("")
    return "\n".join(lines) + "\n"
