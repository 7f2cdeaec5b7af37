"""Catalog of git remotes for cody.

Provides:
- Path resolution for category files and workspace clones
- Reading, appending and rewriting category files
- Scanning the whole catalog
- pull (clone missing), open (resolve one path) and rm (remove entries)
"""

from .errors import (
    AmbiguousError,
    CatalogError,
    ConfigError,
    NotFoundError,
    UnsupportedURLError,
)
from .paths import is_supported_url, resolve_catalog_file, resolve_workspace_path
from .remove import RemovalReport, RemovedEntry, remove_entries
from .resolve import find_matches, open_entry
from .scanner import CatalogEntry, collect_all_entries, iter_catalog_files, scan_entries, search_entries
from .store import AddResult, CatalogStore, read_entries, rewrite_entries
from .sync import PullResult, PullSummary, pull_entries

__all__ = [
    "AddResult",
    "AmbiguousError",
    "CatalogEntry",
    "CatalogError",
    "CatalogStore",
    "ConfigError",
    "NotFoundError",
    "PullResult",
    "PullSummary",
    "RemovalReport",
    "RemovedEntry",
    "UnsupportedURLError",
    "collect_all_entries",
    "find_matches",
    "is_supported_url",
    "iter_catalog_files",
    "open_entry",
    "pull_entries",
    "read_entries",
    "remove_entries",
    "resolve_catalog_file",
    "resolve_workspace_path",
    "rewrite_entries",
    "scan_entries",
    "search_entries",
]
