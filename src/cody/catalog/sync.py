"""Sync Engine for cody.

Clones every catalog entry that is not yet present in the workspace.
Running it again only clones what is still missing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Dict, List, Optional

from .paths import resolve_workspace_path
from .scanner import scan_entries

if TYPE_CHECKING:
    from ..config import Settings
    from ..git import GitCloner

logger = logging.getLogger(__name__)

CLONED = "cloned"
FAILED = "failed"
SKIPPED_EXISTS = "exists"
SKIPPED_UNSUPPORTED = "unsupported"


@dataclass
class PullResult:
    """Outcome of syncing one catalog entry."""
    url: str
    dest: Optional[Path]
    status: str
    detail: str = ""


@dataclass
class PullSummary:
    """Per-status counts for a pull run."""
    results: List[PullResult] = field(default_factory=list)

    def count(self, status: str) -> int:
        return sum(1 for r in self.results if r.status == status)

    def to_dict(self) -> Dict[str, int]:
        return {
            CLONED: self.count(CLONED),
            SKIPPED_EXISTS: self.count(SKIPPED_EXISTS),
            SKIPPED_UNSUPPORTED: self.count(SKIPPED_UNSUPPORTED),
            FAILED: self.count(FAILED),
        }


def is_cloned(dest: Path) -> bool:
    """A clone counts as present once its ``.git`` directory exists."""
    return (dest / ".git").is_dir()


def pull_entry(url: str, workspace_dir: Path, cloner: "GitCloner") -> PullResult:
    dest = resolve_workspace_path(url, workspace_dir)
    if dest is None:
        return PullResult(url=url, dest=None, status=SKIPPED_UNSUPPORTED)

    if is_cloned(dest):
        return PullResult(url=url, dest=dest, status=SKIPPED_EXISTS)

    logger.debug("Cloning %s into %s", url, dest)
    try:
        res = cloner.clone(url, dest)
    except OSError as e:
        return PullResult(url=url, dest=dest, status=FAILED, detail=str(e))
    if res.ok:
        return PullResult(url=url, dest=dest, status=CLONED)

    detail = (res.stderr or res.stdout).strip()
    logger.debug("Clone of %s exited with %d: %s", url, res.code, detail)
    return PullResult(url=url, dest=dest, status=FAILED, detail=detail)


def pull_entries(
    settings: "Settings",
    cloner: "GitCloner",
    pattern: Optional[str] = None,
    on_result: Optional[Callable[[PullResult], None]] = None,
) -> PullSummary:
    """Clone every catalog entry missing from the workspace.

    Entries are processed one at a time in scan order. A failed clone is
    recorded and the batch carries on; nothing here raises for a single entry.

    Args:
        settings: Resolved settings (catalog and workspace directories)
        cloner: Object with ``clone(url, dest) -> ExecResult``
        pattern: Only sync entries whose URL contains this substring
        on_result: Called with each result as soon as it is known
    """
    summary = PullSummary()

    for entry in scan_entries(settings.catalog_dir):
        if pattern and pattern not in entry.url:
            continue
        result = pull_entry(entry.url, settings.workspace_dir, cloner)
        summary.results.append(result)
        if on_result is not None:
            on_result(result)

    return summary
