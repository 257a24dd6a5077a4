"""Check a catalog against the script files actually on disk.

Two directions are checked and every mismatch is collected:

- scripts named in a read-me whose file does not exist in that read-me's
  directory ("missing from disk")
- script files in any source directory that no read-me mentions
  ("missing from catalog")

A file counts as mentioned when its bare name appears anywhere in any
read-me's text, including prose. That is looser than matching link targets
and can hide a file that is only talked about.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import ReconciliationError
from .types import Catalog, ReconcileReport

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".sh"

MISSING_FROM_DISK_HEADING = "Present in catalog but missing from disk:"
MISSING_FROM_CATALOG_HEADING = "Present on disk but missing from catalog:"


def _entry(catalog: Catalog, directory: Path, name: str) -> str:
    """Bare name for a single source directory, else the path in its directory."""
    if len(catalog.source_dirs) > 1:
        return str(directory / name)
    return name


def find_missing_files(catalog: Catalog) -> list[str]:
    """File references that do not resolve to a file in their source directory."""
    missing: list[str] = []
    seen: set[Path] = set()
    for script in catalog.scripts:
        path = script.path
        if path in seen:
            continue
        seen.add(path)
        if not path.is_file():
            logger.debug("Catalog entry %r has no file at %s", script.name, path)
            missing.append(_entry(catalog, script.source_dir, script.file))
    return missing


def list_script_files(directory: Path, extension: str = DEFAULT_EXTENSION) -> list[Path]:
    """Files directly inside ``directory`` with the script extension, sorted."""
    if not directory.is_dir():
        return []
    return sorted(
        entry for entry in directory.iterdir() if entry.is_file() and entry.name.endswith(extension)
    )


def find_unlisted_files(catalog: Catalog, extension: str = DEFAULT_EXTENSION) -> list[str]:
    """Script files on disk that no read-me mentions."""
    texts = [source.text for source in catalog.sources]
    unlisted: list[str] = []
    for directory in catalog.source_dirs:
        for path in list_script_files(directory, extension):
            if not any(path.name in text for text in texts):
                logger.debug("File %s is not mentioned in any read-me", path)
                unlisted.append(_entry(catalog, directory, path.name))
    return unlisted


def reconcile(catalog: Catalog, extension: str = DEFAULT_EXTENSION) -> ReconcileReport:
    """Compare the catalog with the source directories in both directions."""
    report = ReconcileReport(
        missing_from_disk=find_missing_files(catalog),
        missing_from_catalog=find_unlisted_files(catalog, extension),
    )
    logger.debug(
        "Reconciled %d scripts: %d missing from disk, %d missing from catalog",
        len(catalog.scripts),
        len(report.missing_from_disk),
        len(report.missing_from_catalog),
    )
    return report


def format_report(report: ReconcileReport) -> list[str]:
    """Lines listing every mismatch under its heading."""
    lines: list[str] = []
    if report.missing_from_disk:
        lines.append(MISSING_FROM_DISK_HEADING)
        lines.extend(report.missing_from_disk)
    if report.missing_from_catalog:
        lines.append(MISSING_FROM_CATALOG_HEADING)
        lines.extend(report.missing_from_catalog)
    return lines


def check_catalog(catalog: Catalog, extension: str = DEFAULT_EXTENSION) -> ReconcileReport:
    """Reconcile and refuse a catalog that disagrees with the disk.

    Raises:
        ReconciliationError: Either mismatch list is non-empty.
    """
    report = reconcile(catalog, extension)
    if not report.ok:
        raise ReconciliationError(report)
    return report
