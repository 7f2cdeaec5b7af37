"""CLI commands for cody.

- search/list: show catalog entries
- add: file a remote under a category
- pull: clone every entry missing from the workspace
- open: print the workspace path of one entry
- rm: remove entries, confirming each one
- config: show resolved settings
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Union

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .catalog.errors import AmbiguousError, NotFoundError
from .catalog.paths import resolve_workspace_path
from .catalog.remove import RemovedEntry, remove_entries
from .catalog.resolve import open_entry
from .catalog.scanner import search_entries
from .catalog.store import CatalogStore
from .catalog.sync import (
    CLONED,
    FAILED,
    SKIPPED_EXISTS,
    SKIPPED_UNSUPPORTED,
    PullResult,
    is_cloned,
    pull_entries,
)
from .config import Settings
from .git import ExecResult, GitCloner
from .prompt import console_confirm

console = Console()
err_console = Console(stderr=True)


def _echo(text: Union[str, Path]) -> None:
    """Print text exactly as given."""
    console.print(str(text), markup=False, emoji=False, highlight=False, soft_wrap=True)


def _settings(args: argparse.Namespace) -> Settings:
    return Settings.load(home=getattr(args, "home", None))


class _ReportingCloner(GitCloner):
    """GitCloner that announces each clone before git starts."""

    def clone(self, url: str, dest: Union[str, Path]) -> ExecResult:
        console.print(f"Cloning {escape(url)} to {escape(str(dest))}", highlight=False)
        return super().clone(url, dest)


# --- Listing Commands ---

def cmd_search(args: argparse.Namespace) -> int:
    """Print entries containing the pattern, or every entry."""
    settings = _settings(args)
    for entry in search_entries(settings.catalog_dir, args.pattern):
        _echo(entry.url)
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    """Show entries with their category and clone state."""
    settings = _settings(args)
    entries = search_entries(settings.catalog_dir, args.pattern)

    if not entries:
        console.print("[yellow]No entries found.[/yellow]")
        return 0

    table = Table(title="Catalog")
    table.add_column("Category", style="cyan")
    table.add_column("URL", style="bold")
    table.add_column("Path")
    table.add_column("Cloned", justify="center")

    cloned = 0
    for entry in entries:
        dest = resolve_workspace_path(entry.url, settings.workspace_dir)
        if dest is None:
            state = "[dim]n/a[/dim]"
            path = "[dim]unsupported[/dim]"
        elif is_cloned(dest):
            state = "[green]Yes[/green]"
            path = escape(str(dest))
            cloned += 1
        else:
            state = "[red]No[/red]"
            path = escape(str(dest))
        table.add_row(escape(entry.category), escape(entry.url), path, state)

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {len(entries)} ({cloned} cloned)")
    return 0


# --- Editing Commands ---

def cmd_add(args: argparse.Namespace) -> int:
    """Add a remote to a category file."""
    settings = _settings(args)
    category = args.category or settings.default_category

    result = CatalogStore(settings.catalog_dir).append_entry(category, args.url)

    if result.added:
        console.print(f"[green]Entry added to[/green] {escape(str(result.path))}", highlight=False)
    else:
        console.print(f"[yellow]Entry already exists in[/yellow] {escape(str(result.path))}", highlight=False)
    return 0


def cmd_rm(args: argparse.Namespace) -> int:
    """Remove entries containing the given substring."""
    settings = _settings(args)

    def _confirm(prompt: str) -> bool:
        return console_confirm(prompt, console=console)

    def _removed(entry: RemovedEntry) -> None:
        console.print(
            f"[green]Removed[/green] {escape(entry.url)} from {escape(entry.category)}",
            highlight=False,
        )

    report = remove_entries(
        settings,
        args.target,
        confirm=_confirm,
        force=args.force,
        on_removed=_removed,
    )

    if not report.found:
        console.print("[yellow]Entry not found.[/yellow]")
        return 0

    if report.kept:
        console.print(f"Kept {len(report.kept)} matching entr{'y' if len(report.kept) == 1 else 'ies'}.")
    return 0


# --- Workspace Commands ---

def _print_pull_result(result: PullResult) -> None:
    url = escape(result.url)
    if result.status == SKIPPED_UNSUPPORTED:
        console.print(f"[yellow]Skipped[/yellow] {url} (unsupported URL format)", highlight=False)
    elif result.status == SKIPPED_EXISTS:
        console.print(f"[dim]Skipped {url} (already exists)[/dim]", highlight=False)
    elif result.status == CLONED:
        console.print(f"[green]Clone success[/green] {url}", highlight=False)
    elif result.status == FAILED:
        console.print(f"[red]Clone failed[/red] {url}", highlight=False)
        if result.detail:
            console.print(escape(result.detail), style="dim", highlight=False)


def cmd_pull(args: argparse.Namespace) -> int:
    """Clone every catalog entry not yet in the workspace.

    Failed clones are reported but do not change the exit code.
    """
    settings = _settings(args)
    summary = pull_entries(
        settings,
        _ReportingCloner(settings.git),
        pattern=args.filter,
        on_result=_print_pull_result,
    )

    if not summary.results:
        console.print("[yellow]No entries to pull.[/yellow]")
        return 0

    counts = summary.to_dict()
    console.print(
        f"\n[bold]Pull complete:[/bold] {counts[CLONED]} cloned, "
        f"{counts[SKIPPED_EXISTS]} existing, {counts[SKIPPED_UNSUPPORTED]} unsupported, "
        f"{counts[FAILED]} failed"
    )
    return 0


def cmd_open(args: argparse.Namespace) -> int:
    """Print the workspace path of the single entry matching the filter."""
    settings = _settings(args)

    try:
        path = open_entry(settings, args.filter)
    except NotFoundError as e:
        err_console.print(f"[red]Error:[/red] no entry matches '{escape(e.pattern)}'")
        return 1
    except AmbiguousError as e:
        err_console.print(
            f"[red]Error:[/red] '{escape(e.pattern)}' is ambiguous, {len(e.matches)} entries match:"
        )
        for match in e.matches:
            err_console.print(f"  {escape(match)}", highlight=False)
        return 1

    _echo(path)
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    """Show resolved settings."""
    settings = _settings(args)
    lines = [
        f"[bold]Home:[/bold] {escape(str(settings.home))}",
        f"[bold]Catalog:[/bold] {escape(str(settings.catalog_dir))}",
        f"[bold]Workspace:[/bold] {escape(str(settings.workspace_dir))}",
        f"[bold]Default category:[/bold] {escape(settings.default_category)}",
        f"[bold]Git:[/bold] {escape(settings.git)}",
    ]
    console.print(Panel("\n".join(lines), title="cody config", border_style="cyan"))
    return 0


# --- Parser Setup ---

def add_commands(subparsers: argparse._SubParsersAction) -> None:
    """Add catalog commands to the main parser."""

    # search
    p_search = subparsers.add_parser("search", help="Print entries containing a pattern")
    p_search.add_argument("pattern", nargs="?", help="Substring to look for (default: all entries)")
    p_search.set_defaults(func=cmd_search)

    # list
    p_list = subparsers.add_parser("list", help="Show entries with category and clone state")
    p_list.add_argument("pattern", nargs="?", help="Substring to look for (default: all entries)")
    p_list.set_defaults(func=cmd_list)

    # add
    p_add = subparsers.add_parser("add", help="Add a remote URL to a category")
    p_add.add_argument("url", help="Remote URL (git@host:org/repo.git)")
    p_add.add_argument("category", nargs="?", help="Category name (default from config)")
    p_add.set_defaults(func=cmd_add)

    # pull
    p_pull = subparsers.add_parser("pull", help="Clone entries missing from the workspace")
    p_pull.add_argument("filter", nargs="?", help="Only pull entries containing this substring")
    p_pull.set_defaults(func=cmd_pull)

    # open
    p_open = subparsers.add_parser("open", help="Print the workspace path of one entry")
    p_open.add_argument("filter", help="Substring identifying exactly one entry")
    p_open.set_defaults(func=cmd_open)

    # rm
    p_rm = subparsers.add_parser("rm", help="Remove entries containing a substring")
    p_rm.add_argument("target", help="Substring of the entries to remove")
    p_rm.add_argument("--force", "-f", action="store_true", help="Skip confirmation")
    p_rm.set_defaults(func=cmd_rm)

    # config
    p_config = subparsers.add_parser("config", help="Show resolved settings")
    p_config.set_defaults(func=cmd_config)
