"""Cabal operations used to export local add-source dependencies."""

from __future__ import annotations

import logging
from pathlib import Path

from tinc.constants.config import DEFAULT_CABAL_EXECUTABLE
from tinc.process.runner import ProcessRunner

logger = logging.getLogger(__name__)


class Cabal:
    """Thin wrapper over the ``cabal`` executable."""

    def __init__(self, runner: ProcessRunner, executable: str = DEFAULT_CABAL_EXECUTABLE) -> None:
        self.runner = runner
        self.executable = executable

    def sdist(self, source_dir: Path, output_dir: Path) -> None:
        """Export the source distribution of *source_dir* as a tree in *output_dir*."""
        logger.info("Exporting source distribution of %s", source_dir)
        self.runner.call(
            [self.executable, "sdist", "--output-directory", str(output_dir)],
            cwd=source_dir,
        )
