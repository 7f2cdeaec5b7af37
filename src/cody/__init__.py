"""cody - catalog of git remotes with a deterministic clone layout."""

__version__ = "0.1.0"
