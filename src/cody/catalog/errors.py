"""Errors raised by catalog operations."""

from __future__ import annotations

from typing import List


class CatalogError(Exception):
    """Error from catalog operations."""
    pass


class ConfigError(CatalogError):
    """Settings could not be resolved (home directory, config file)."""
    pass


class NotFoundError(CatalogError):
    """No catalog entry matched a filter."""

    def __init__(self, pattern: str):
        self.pattern = pattern
        super().__init__(f"No entry matches '{pattern}'")


class AmbiguousError(CatalogError):
    """More than one catalog entry matched a filter."""

    def __init__(self, pattern: str, matches: List[str]):
        self.pattern = pattern
        self.matches = list(matches)
        listing = "\n".join(f"  {m}" for m in self.matches)
        super().__init__(
            f"'{pattern}' matches {len(self.matches)} entries:\n{listing}"
        )


class UnsupportedURLError(CatalogError):
    """Entry cannot be mapped to a workspace path."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Unsupported URL format: {url}")
