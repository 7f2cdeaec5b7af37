"""Path resolution for catalog files and workspace clones.

Both functions are pure: they join paths and never touch the filesystem.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple, Union

CATALOG_EXT = ".code"
SSH_PREFIX = "git@"
GIT_SUFFIX = ".git"


def resolve_catalog_file(root: Union[str, Path], category: str) -> Path:
    """Return the catalog file for a category: ``<root>/<category>.code``."""
    return Path(root) / f"{category}{CATALOG_EXT}"


def split_ssh_url(url: str) -> Optional[Tuple[str, str]]:
    """Split ``git@host:path[.git]`` into ``(host, path)``.

    Returns None for anything outside that grammar, e.g. ``https://`` remotes.
    """
    if not url.startswith(SSH_PREFIX):
        return None

    host, sep, rest = url[len(SSH_PREFIX):].partition(":")
    if not sep:
        return None

    if rest.endswith(GIT_SUFFIX):
        rest = rest[: -len(GIT_SUFFIX)]
    rest = rest.strip("/")

    if not host or not rest:
        return None
    # Paths must stay below the workspace root
    if "/" in host or host == ".." or ".." in rest.split("/"):
        return None
    return host, rest


def is_supported_url(url: str) -> bool:
    return split_ssh_url(url) is not None


def resolve_workspace_path(url: str, workspace_root: Union[str, Path]) -> Optional[Path]:
    """Map a remote URL to its clone directory under ``workspace_root``.

    ``git@github.com:user/repo.git`` -> ``<workspace_root>/github.com/user/repo``.
    None means the URL cannot be mapped; callers skip the entry rather than fail.
    """
    parts = split_ssh_url(url)
    if parts is None:
        return None
    host, rest = parts
    return Path(workspace_root) / host / rest
