"""External command execution and the git clone capability."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Union

logger = logging.getLogger(__name__)


@dataclass
class ExecResult:
    code: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.code == 0


def run_command(argv: Sequence[str], cwd: Optional[str] = None) -> ExecResult:
    """Run ``argv`` and capture its output.

    stdin stays attached to the terminal so ssh can still ask for a passphrase.
    A missing executable is reported as exit code 127 instead of raising.
    """
    logger.debug("Running %s", " ".join(argv))
    try:
        p = subprocess.run(list(argv), cwd=cwd, capture_output=True, text=True)
    except FileNotFoundError as e:
        return ExecResult(127, "", str(e))
    return ExecResult(p.returncode, p.stdout or "", p.stderr or "")


class GitCloner:
    """Clones remotes with the git command line."""

    def __init__(self, git: str = "git"):
        self.git = git

    def argv(self, url: str, dest: Union[str, Path]) -> List[str]:
        return [self.git, "clone", url, str(dest)]

    def clone(self, url: str, dest: Union[str, Path]) -> ExecResult:
        try:
            Path(dest).parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return ExecResult(1, "", str(e))
        return run_command(self.argv(url, dest))
