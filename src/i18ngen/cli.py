"""Command-line entry point.

Usage:
    i18ngen init                  Create config, default resource and output
    i18ngen update                Regenerate the output
    i18ngen add-locale [LOCALE]   Add a locale (prompted when omitted)
    i18ngen remove-locale [LOCALE]
    i18ngen insert KEY [VALUE]    Add a key to the default locale
    i18ngen translate             Machine-translate missing keys

Exit Codes:
    0: Success
    1: Operation failed (configuration, locale, translation or validation error)
    2: Usage error

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from i18ngen import __version__
from i18ngen.commands import I18nCommands
from i18ngen.diagnostics import I18nError
from i18ngen.interaction import ConsoleInteraction
from i18ngen.storage.store import ResourceStore

if TYPE_CHECKING:
    from collections.abc import Sequence

    from i18ngen.interaction import UserInteraction

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="i18ngen",
        description="Generate Dart localization code from JSON translation resources.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-w",
        "--workspace",
        type=Path,
        default=Path.cwd(),
        help="Workspace root containing i18nconfig.json (default: current directory)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("init", help="Create configuration and generate initial output")
    subparsers.add_parser("update", help="Regenerate the output")

    add = subparsers.add_parser("add-locale", help="Add a locale")
    add.add_argument("locale", nargs="?", help="Locale code, e.g. fr-CA")

    remove = subparsers.add_parser("remove-locale", help="Remove a locale")
    remove.add_argument("locale", nargs="?", help="Locale code to remove")

    insert = subparsers.add_parser("insert", help="Add a key to the default locale")
    insert.add_argument("key", help="Accessor name")
    insert.add_argument("value", nargs="?", help="Default-locale text")

    subparsers.add_parser("translate", help="Machine-translate missing keys")
    return parser


def _run(args: argparse.Namespace, commands: I18nCommands, ui: UserInteraction) -> None:
    match args.command:
        case "init":
            result = commands.initialize()
            ui.show_info(f"Initialized; output written to {result.output_path}")
        case "update":
            result = commands.update()
            ui.show_info(f"Output written to {result.output_path}")
        case "add-locale":
            commands.add_locale(args.locale)
        case "remove-locale":
            commands.remove_locale(args.locale)
        case "insert":
            suffix = commands.insert_key(args.key, args.value)
            if suffix:
                ui.show_info(f"Call as: {args.key}{suffix}")
        case "translate":
            commands.auto_translate()


def main(argv: Sequence[str] | None = None, ui: UserInteraction | None = None) -> int:
    """Run the command line.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])
        ui: User interaction implementation (defaults to the console)

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ui = ui or ConsoleInteraction()
    commands = I18nCommands(ResourceStore(args.workspace), ui)
    try:
        _run(args, commands, ui)
    except I18nError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        ui.show_error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
