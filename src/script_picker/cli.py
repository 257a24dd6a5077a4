"""CLI interface for script-picker.

Usage:
    script-picker path/to/README.md [more/README.md ...]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from rich_menu import Theme

from . import __version__, config
from .catalog import describe_catalog, load_catalog
from .errors import ReconciliationError, ScriptPickerError
from .invocation import build_invocation, dispatch_invocation
from .picker import run_picker
from .reconcile import check_catalog, format_report

_console: Console | None = None


def _get_console() -> Console:
    global _console
    if _console is None:
        _console = Console(highlight=False)
    return _console


def _print(msg: str = "") -> None:
    """Print with Rich markup support."""
    _get_console().print(msg, soft_wrap=True)


def _fail(msg: str) -> None:
    _print(f"[red]Error:[/red] {escape(msg)}")
    sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="script-picker",
        description="Pick a script from read-me documented script directories and "
        "pre-type its invocation at the prompt.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"script-picker {__version__}")
    parser.add_argument(
        "readmes",
        nargs="+",
        type=Path,
        help="Read-me file(s); each one's directory holds the scripts it documents",
    )
    parser.add_argument(
        "--dump",
        action="store_true",
        help="Print the parsed catalog and exit (no reconciliation, no menu)",
    )
    parser.add_argument("--extension", help="Script file extension (default from config: .sh)")
    parser.add_argument("--config", type=Path, help="Config file to use instead of the default")
    parser.add_argument("--debug", action="store_true", help="Write debug log to the config dir")
    return parser


def cmd_pick(args) -> None:
    """Load, validate, show the menu and dispatch the chosen invocation."""
    cfg = config.load_config(args.config)
    config.setup_logging(args.debug or bool(cfg.get("debug")))

    try:
        catalog = load_catalog(args.readmes)
    except ScriptPickerError as e:
        _fail(str(e))

    if args.dump:
        for line in describe_catalog(catalog):
            _print(escape(line))
        return

    extension = args.extension or cfg.get("extension") or ".sh"
    try:
        check_catalog(catalog, extension)
    except ReconciliationError as e:
        for line in format_report(e.report):
            _print(escape(line))
        sys.exit(1)

    if not catalog:
        _print("No script categories found.")
        return

    theme = Theme(panel_width=int(cfg["ui"].get("width", 100)))
    choice = run_picker(catalog, console=_get_console(), theme=theme)
    if choice is None:
        _print("Goodbye.")
        return

    invocation_cfg = cfg["invocation"]
    invocation = build_invocation(catalog.scripts[choice], prefix=invocation_cfg.get("prefix", ""))

    _get_console().clear()
    for line in invocation.summary():
        _print(escape(line))

    injector = invocation_cfg.get("injector")
    if injector:
        dispatch_invocation(invocation.text, injector, float(invocation_cfg.get("delay", 0.1)))
    else:
        _print(f"Invocation: {escape(invocation.text)}")


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        cmd_pick(args)
    except KeyboardInterrupt:
        _print()
        _print("Goodbye.")
        sys.exit(130)


if __name__ == "__main__":
    main()
