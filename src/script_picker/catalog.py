"""Merge one or more parsed read-mes into a single catalog."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from .errors import StartupError
from .readme_parser import parse_readme
from .types import Catalog, Category, ReadmeSource, Script

logger = logging.getLogger(__name__)


def check_readme_paths(paths: list[Path]) -> list[Path]:
    """Validate read-me arguments before anything is parsed.

    Returns:
        The paths, resolved.

    Raises:
        StartupError: A read-me's directory or the read-me itself is missing.
    """
    resolved = []
    for path in paths:
        path = Path(path).expanduser()
        if not path.parent.is_dir():
            raise StartupError(f"Did not find a directory at {path.parent}")
        if not path.is_file():
            raise StartupError(f"Did not find a read-me file at {path}")
        resolved.append(path.resolve())
    return resolved


def read_sources(paths: list[Path]) -> list[ReadmeSource]:
    """Read each read-me into a ReadmeSource, keeping argument order.

    Raises:
        StartupError: A read-me cannot be read or is not UTF-8.
    """
    sources = []
    for path in paths:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StartupError(f"Could not read {path}: {e}") from e
        sources.append(ReadmeSource(path=path, text=text))
    return sources


def merge_readmes(sources: list[ReadmeSource]) -> Catalog:
    """Parse read-mes in order and combine them.

    Category indices are renumbered so that categories of source K follow
    every category of the sources before it. Scripts keep the directory of
    the read-me that declared them.
    """
    categories: list[Category] = []
    scripts: list[Script] = []

    for source in sources:
        parsed = parse_readme(source.text, source_dir=source.directory)
        offset = len(categories)
        categories.extend(parsed.categories)
        scripts.extend(
            replace(script, category_index=script.category_index + offset)
            for script in parsed.scripts
        )
        logger.debug(
            "Merged %s: categories %d-%d", source.path, offset, len(categories) - 1
        )

    return Catalog(categories=tuple(categories), scripts=tuple(scripts), sources=tuple(sources))


def load_catalog(paths: list[Path]) -> Catalog:
    """Check, read, parse and merge the given read-me files."""
    return merge_readmes(read_sources(check_readme_paths(paths)))


def describe_catalog(catalog: Catalog) -> list[str]:
    """Plain-text listing of every category and script, for --dump."""
    lines = ["Found these categories:"]
    for category in catalog.categories:
        lines.append(f"Category: {category.name}")
        lines.append(f"Count:    {category.script_count}")
        lines.append("")

    lines.append("Found these scripts:")
    for script in catalog.scripts:
        lines.append(f"Category: {catalog.categories[script.category_index].name}")
        lines.append(f"Name:     {script.name}")
        lines.append(f"File:     {script.file}")
        lines.extend(describe_parameters(script))
        lines.append(f"Descrip:  {script.description}")
        lines.append("")
    return lines


def describe_parameters(script: Script) -> list[str]:
    """One line per documented parameter, or a note that there are none."""
    if not script.takes_parameters:
        return ["This script has no parameters."]
    return [f"Param {i}:  {text}" for i, text in enumerate(script.parameters, start=1)]
