"""cody CLI - catalog of git remotes.

Usage:
    cody search [pattern]         # Print matching (or all) entries
    cody list [pattern]           # Table of entries and clone state
    cody add <url> [category]     # File a remote under a category
    cody pull [filter]            # Clone entries missing from ~/code
    cody open <filter>            # Print the path of one clone
    cody rm <substring> [--force] # Remove entries
    cody config                   # Show resolved settings

Shell integration:
    cd "$(cody open repo)"
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from rich.logging import RichHandler
from rich.markup import escape

from . import __version__
from .catalog.errors import CatalogError
from .commands import add_commands, err_console


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False, show_time=False)],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cody",
        description="cody: file git remotes under categories and clone them into ~/code",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--home", help="Home directory override (default: $CODY_HOME or ~)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="subcmd")
    add_commands(sub)
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run a command, returning the exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    if not getattr(args, "func", None):
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except (CatalogError, OSError) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        return 1
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Interrupted.[/yellow]")
        return 130


def main() -> None:
    raise SystemExit(run())


if __name__ == "__main__":
    main()
