"""Errors raised while loading and validating the script catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import ReconcileReport


class ScriptPickerError(RuntimeError):
    """Base error for fatal script-picker conditions."""


class StartupError(ScriptPickerError):
    """Raised when a read-me argument or its directory does not exist."""


class ReadmeFormatError(ScriptPickerError):
    """Raised when a read-me breaks the catalog format."""

    def __init__(self, message: str, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        super().__init__(f"{message} (line {line_number}: '{line}')")


class TooManyParametersError(ReadmeFormatError):
    """Raised when a parameter comment runs past the last slot."""


class ReconciliationError(ScriptPickerError):
    """Raised when the catalog and the script directories disagree."""

    def __init__(self, report: ReconcileReport):
        self.report = report
        super().__init__(
            f"Catalog does not match disk: {len(report.missing_from_disk)} missing from disk, "
            f"{len(report.missing_from_catalog)} missing from catalog"
        )
