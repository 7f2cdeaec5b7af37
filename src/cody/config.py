from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .catalog.errors import ConfigError

APP = "cody"

CATALOG_DIRNAME = ".code.d"
WORKSPACE_DIRNAME = "code"
DEFAULT_CATEGORY = "default"


def resolve_home(home: Optional[Union[str, Path]] = None) -> Path:
    """Home directory: explicit argument, then $CODY_HOME, then the user's home."""
    if home:
        return Path(home).expanduser()
    env_home = os.environ.get("CODY_HOME")
    if env_home:
        return Path(env_home).expanduser()
    try:
        return Path.home()
    except RuntimeError as e:
        raise ConfigError(f"Cannot resolve home directory: {e}") from e


def config_dir(home: Path) -> Path:
    """
    Config directory: $XDG_CONFIG_HOME/cody or <home>/.config/cody
    """
    return Path(os.environ.get("XDG_CONFIG_HOME", str(home / ".config"))) / APP


def config_path(home: Path) -> Path:
    return config_dir(home) / "config.json"


def _expand(value: Union[str, Path], home: Path) -> Path:
    text = str(value)
    if text == "~" or text.startswith("~/"):
        text = str(home) + text[1:]
    path = Path(text)
    if not path.is_absolute():
        path = home / path
    return path


@dataclass
class Settings:
    home: Path
    catalog_dir: Optional[Path] = None     # category files (<home>/.code.d)
    workspace_dir: Optional[Path] = None   # clone destinations (<home>/code)
    default_category: str = DEFAULT_CATEGORY
    git: str = "git"

    def __post_init__(self) -> None:
        self.home = Path(self.home)
        if self.catalog_dir is None:
            self.catalog_dir = self.home / CATALOG_DIRNAME
        if self.workspace_dir is None:
            self.workspace_dir = self.home / WORKSPACE_DIRNAME
        self.catalog_dir = _expand(self.catalog_dir, self.home)
        self.workspace_dir = _expand(self.workspace_dir, self.home)

    @staticmethod
    def load(home: Optional[Union[str, Path]] = None, path: Optional[Path] = None) -> "Settings":
        home_dir = resolve_home(home)
        path = path or config_path(home_dir)

        data: dict = {}

        if path.exists():
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
            except (OSError, ValueError):
                data = {}
            if not isinstance(data, dict):
                data = {}

        s = Settings(
            home=home_dir,
            catalog_dir=data.get("catalog_dir"),
            workspace_dir=data.get("workspace_dir"),
            default_category=str(data.get("default_category", DEFAULT_CATEGORY)),
            git=str(data.get("git", "git")),
        )

        # Environment overrides (highest priority)
        if os.environ.get("CODY_CATALOG_DIR"):
            s.catalog_dir = _expand(os.environ["CODY_CATALOG_DIR"], home_dir)
        if os.environ.get("CODY_WORKSPACE_DIR"):
            s.workspace_dir = _expand(os.environ["CODY_WORKSPACE_DIR"], home_dir)
        s.default_category = os.environ.get("CODY_DEFAULT_CATEGORY", s.default_category)
        s.git = os.environ.get("CODY_GIT", s.git)

        if not s.default_category:
            raise ConfigError("Default category must not be empty.")

        return s

    def to_dict(self) -> dict:
        return {
            "catalog_dir": str(self.catalog_dir),
            "workspace_dir": str(self.workspace_dir),
            "default_category": self.default_category,
            "git": self.git,
        }

    def save(self, path: Optional[Path] = None) -> Path:
        path = path or config_path(self.home)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        return path
