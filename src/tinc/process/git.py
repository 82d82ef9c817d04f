"""Git operations used to materialize add-source dependencies."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from tinc.constants.cache import GIT_METADATA_DIRNAME
from tinc.constants.config import DEFAULT_GIT_EXECUTABLE
from tinc.process.runner import ProcessRunner

logger = logging.getLogger(__name__)


class Git:
    """Thin wrapper over the ``git`` executable."""

    def __init__(self, runner: ProcessRunner, executable: str = DEFAULT_GIT_EXECUTABLE) -> None:
        self.runner = runner
        self.executable = executable

    def ls_remote(self, url: str, ref: str) -> str:
        """Return raw ``git ls-remote`` output for *ref* (``<rev>\\t<refname>`` lines)."""
        return self.runner.read([self.executable, "ls-remote", url, ref])

    def clone(self, url: str, destination: Path) -> None:
        logger.info("Cloning %s", url)
        self.runner.call([self.executable, "clone", "--quiet", url, str(destination)])

    def reset_hard(self, repository: Path, revision: str) -> None:
        self.runner.call([self.executable, "reset", "--quiet", "--hard", revision], cwd=repository)

    def remove_metadata(self, repository: Path) -> None:
        """Delete ``.git`` so only the exported tree remains."""
        shutil.rmtree(repository / GIT_METADATA_DIRNAME)
