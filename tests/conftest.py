"""Shared fixtures for cody tests."""

from pathlib import Path

import pytest

from cody.config import Settings
from cody.git import ExecResult


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the user's environment out of settings resolution."""
    for name in (
        "CODY_HOME",
        "CODY_CATALOG_DIR",
        "CODY_WORKSPACE_DIR",
        "CODY_DEFAULT_CATEGORY",
        "CODY_GIT",
        "XDG_CONFIG_HOME",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings(tmp_path):
    return Settings(home=tmp_path)


def write_catalog(settings, category, content):
    """Write a category file with raw content and return its path."""
    path = settings.catalog_dir / f"{category}.code"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


class FakeCloner:
    """Records clone calls and creates ``<dest>/.git`` on success."""

    def __init__(self, fail_on=()):
        self.calls = []
        self.fail_on = set(fail_on)

    def clone(self, url, dest):
        self.calls.append((url, Path(dest)))
        if url in self.fail_on:
            return ExecResult(128, "", f"fatal: could not read from remote {url}")
        (Path(dest) / ".git").mkdir(parents=True)
        return ExecResult(0, "", "")


@pytest.fixture
def cloner():
    return FakeCloner()


@pytest.fixture
def catalog(settings):
    """Writer for raw category files: ``catalog("work", "url\\n")``."""

    def _write(category, content):
        return write_catalog(settings, category, content)

    return _write
