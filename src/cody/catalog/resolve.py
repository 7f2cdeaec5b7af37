"""Disambiguator: map a filter to exactly one workspace path."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, List, Sequence

from .errors import AmbiguousError, NotFoundError, UnsupportedURLError
from .paths import resolve_workspace_path
from .scanner import collect_all_entries

if TYPE_CHECKING:
    from ..config import Settings


def find_matches(entries: Sequence[str], pattern: str) -> List[str]:
    """Entries containing ``pattern`` (case-sensitive), in their original order."""
    return [url for url in entries if pattern in url]


def open_entry(settings: "Settings", pattern: str) -> Path:
    """Resolve the workspace path of the single entry matching ``pattern``.

    Raises:
        NotFoundError: nothing matches
        AmbiguousError: more than one entry matches; no best match is picked
        UnsupportedURLError: the match has no workspace path
    """
    matches = find_matches(collect_all_entries(settings.catalog_dir), pattern)

    if not matches:
        raise NotFoundError(pattern)
    if len(matches) > 1:
        raise AmbiguousError(pattern, matches)

    url = matches[0]
    dest = resolve_workspace_path(url, settings.workspace_dir)
    if dest is None:
        raise UnsupportedURLError(url)
    return dest
