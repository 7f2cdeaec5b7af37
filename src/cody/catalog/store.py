"""Catalog Store: read, append and rewrite a single category file."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Union

from .errors import CatalogError
from .paths import resolve_catalog_file

logger = logging.getLogger(__name__)


@dataclass
class AddResult:
    """Outcome of appending an entry to a category."""
    path: Path
    url: str
    added: bool


def parse_lines(content: str) -> List[str]:
    """Trimmed, non-empty lines of a catalog file's content."""
    return [line.strip() for line in content.splitlines() if line.strip()]


def read_text(path: Union[str, Path]) -> str:
    """Content of a catalog file.

    OSError propagates to the caller; content that is not UTF-8 raises
    CatalogError naming the file.
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise CatalogError(f"Catalog file {path} is not valid UTF-8: {e.reason} at byte {e.start}") from e


def read_entries(path: Union[str, Path]) -> List[str]:
    """Read the entries of one catalog file."""
    return parse_lines(read_text(path))


def rewrite_entries(path: Union[str, Path], kept_lines: Iterable[str]) -> None:
    """Replace a catalog file's contents with ``kept_lines``.

    Each line is written followed by a newline; no lines gives an empty file.
    The new content goes to a temporary file in the same directory which is
    then renamed over the original, so the file is never left half-written.
    """
    path = Path(path)
    content = "".join(f"{line}\n" for line in kept_lines)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(content)
            fh.flush()
            os.fsync(fh.fileno())
        if path.exists():
            shutil.copymode(str(path), tmp_name)
        os.replace(tmp_name, str(path))
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise

    logger.debug("Rewrote %s (%d bytes)", path, len(content))


class CatalogStore:
    """Category files under a catalog root."""

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)

    def path_for(self, category: str) -> Path:
        return resolve_catalog_file(self.root, category)

    def read_entries(self, category: str) -> List[str]:
        """Entries of a category; a category never written to has none."""
        path = self.path_for(category)
        if not path.exists():
            return []
        return read_entries(path)

    def append_entry(self, category: str, url: str) -> AddResult:
        """Append ``url`` to the category file unless it is already there.

        A duplicate is not an error: the result has ``added`` set to False.
        """
        url = url.strip()
        if not url:
            raise CatalogError("Cannot add an empty entry.")
        if not category:
            raise CatalogError("Category name is required.")

        path = self.path_for(category)
        path.parent.mkdir(parents=True, exist_ok=True)

        content = ""
        if path.exists():
            content = read_text(path)
            if url in parse_lines(content):
                logger.debug("%s already present in %s", url, path)
                return AddResult(path=path, url=url, added=False)

        # Keep the new entry on its own line when the file lacks a final newline
        prefix = "\n" if content and not content.endswith("\n") else ""
        with path.open("a", encoding="utf-8") as fh:
            fh.write(f"{prefix}{url}\n")

        logger.debug("Appended %s to %s", url, path)
        return AddResult(path=path, url=url, added=True)
