"""Catalog Scanner: aggregate entries across every category file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Union

from .paths import CATALOG_EXT
from .store import read_entries

logger = logging.getLogger(__name__)


@dataclass
class CatalogEntry:
    """One URL line together with the category file it came from."""
    url: str
    category: str
    source: Path


def _raise(err: OSError) -> None:
    raise err


def category_of(root: Union[str, Path], path: Union[str, Path]) -> str:
    """Category name of a catalog file, e.g. ``work/infra`` for ``<root>/work/infra.code``."""
    rel = Path(path).relative_to(Path(root)).as_posix()
    return rel[: -len(CATALOG_EXT)]


def iter_catalog_files(root: Union[str, Path]) -> Iterator[Path]:
    """Yield every ``.code`` file below ``root``, recursively.

    Directories and files are visited in sorted order. A missing root is an
    empty catalog.
    """
    root = Path(root)
    if not root.is_dir():
        logger.debug("Catalog root %s does not exist", root)
        return

    for dirpath, dirnames, filenames in os.walk(str(root), onerror=_raise):
        dirnames.sort()
        for name in sorted(filenames):
            if not name.endswith(CATALOG_EXT):
                continue
            path = Path(dirpath) / name
            if path.is_file():
                yield path


def scan_entries(root: Union[str, Path]) -> List[CatalogEntry]:
    """All entries in file-then-line order.

    A read error on any catalog file aborts the scan.
    """
    entries: List[CatalogEntry] = []
    for path in iter_catalog_files(root):
        category = category_of(root, path)
        for url in read_entries(path):
            entries.append(CatalogEntry(url=url, category=category, source=path))
    logger.debug("Scanned %d entries under %s", len(entries), root)
    return entries


def collect_all_entries(root: Union[str, Path]) -> List[str]:
    return [entry.url for entry in scan_entries(root)]


def search_entries(root: Union[str, Path], pattern: Optional[str] = None) -> List[CatalogEntry]:
    """Entries whose URL contains ``pattern``; every entry when no pattern is given."""
    entries = scan_entries(root)
    if not pattern:
        return entries
    return [entry for entry in entries if pattern in entry.url]
