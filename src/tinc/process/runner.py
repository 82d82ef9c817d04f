"""Narrow subprocess interface so resolution logic can run against fakes in tests."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from tinc.exceptions import ProcessError

logger = logging.getLogger(__name__)


class ProcessRunner(Protocol):
    """Runs external commands."""

    def read(self, args: Sequence[str], *, cwd: Path | None = None) -> str:
        """Run *args* and return its standard output."""
        ...

    def call(self, args: Sequence[str], *, cwd: Path | None = None) -> None:
        """Run *args* for its side effects."""
        ...


class SubprocessRunner:
    """``ProcessRunner`` backed by :func:`subprocess.run`."""

    def read(self, args: Sequence[str], *, cwd: Path | None = None) -> str:
        return self._run(args, cwd=cwd).stdout

    def call(self, args: Sequence[str], *, cwd: Path | None = None) -> None:
        self._run(args, cwd=cwd)

    def _run(self, args: Sequence[str], *, cwd: Path | None) -> subprocess.CompletedProcess[str]:
        command = [str(arg) for arg in args]
        logger.debug("Running %s%s", " ".join(command), f" (in {cwd})" if cwd else "")
        try:
            result = subprocess.run(  # noqa: S603
                command,
                cwd=cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise ProcessError(command, None, str(exc), cwd=cwd) from exc

        if result.returncode != 0:
            output = "\n".join(part for part in (result.stderr.strip(), result.stdout.strip()) if part)
            raise ProcessError(command, result.returncode, output, cwd=cwd)
        return result
