"""Removal Engine: delete matching entries from every category file.

Each occurrence of a matching line is judged on its own, so the same URL
filed under two categories is confirmed twice.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Callable, List, Optional

from .scanner import category_of, iter_catalog_files
from .store import read_entries, rewrite_entries

if TYPE_CHECKING:
    from ..config import Settings

logger = logging.getLogger(__name__)


@dataclass
class RemovedEntry:
    url: str
    category: str
    path: Path


@dataclass
class RemovalReport:
    """What an ``rm`` run matched, dropped and kept."""
    matched: int = 0
    removed: List[RemovedEntry] = field(default_factory=list)
    kept: List[RemovedEntry] = field(default_factory=list)
    rewritten: List[Path] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.matched > 0


def confirm_prompt(url: str, category: str) -> str:
    return f"Remove {url} from {category}?"


def remove_entries(
    settings: "Settings",
    target: str,
    confirm: Callable[[str], bool],
    force: bool = False,
    on_removed: Optional[Callable[[RemovedEntry], None]] = None,
) -> RemovalReport:
    """Remove catalog lines containing ``target``.

    Args:
        settings: Resolved settings (catalog directory)
        target: Substring a line must contain to be considered
        confirm: Asked once per matching line unless ``force`` is set
        force: Drop every match without asking
        on_removed: Called for each dropped line

    Files where something matched are rewritten with the surviving lines in
    their original order, even if every removal was declined. Files with no
    match are left alone.
    """
    report = RemovalReport()
    root = settings.catalog_dir

    # Read everything first so a rewrite cannot affect the walk
    files = [(path, read_entries(path)) for path in iter_catalog_files(root)]

    for path, lines in files:
        category = category_of(root, path)
        kept: List[str] = []
        file_matched = False

        for line in lines:
            if target not in line:
                kept.append(line)
                continue

            file_matched = True
            report.matched += 1
            entry = RemovedEntry(url=line, category=category, path=path)

            if force or confirm(confirm_prompt(line, category)):
                report.removed.append(entry)
                if on_removed is not None:
                    on_removed(entry)
            else:
                kept.append(line)
                report.kept.append(entry)

        if file_matched:
            rewrite_entries(path, kept)
            report.rewritten.append(path)
            logger.debug("Rewrote %s keeping %d of %d entries", path, len(kept), len(lines))

    return report
