"""Failures of external commands (git, cabal, ghc, ghc-pkg)."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from tinc.exceptions.base import TincError


class ProcessError(TincError):
    """Raised when an external command cannot start, exits non-zero, or prints unusable output.

    ``context`` names what the command was doing, e.g. which dependency was
    being fetched; it prefixes the message when set.
    """

    def __init__(
        self,
        command: Sequence[str],
        returncode: int | None,
        output: str = "",
        *,
        cwd: Path | None = None,
        context: str = "",
    ) -> None:
        self.command = tuple(command)
        self.returncode = returncode
        self.output = output
        self.cwd = cwd
        self.context = context
        rendered = " ".join(self.command)
        if cwd is not None:
            rendered = f"{rendered} (in {cwd})"
        if returncode is None:
            message = f"could not run command: {rendered}"
        elif returncode == 0:
            message = f"unexpected output from command: {rendered}"
        else:
            message = f"command failed with exit code {returncode}: {rendered}"
        if context:
            message = f"{context}: {message}"
        if output.strip():
            message = f"{message}\n{output.rstrip()}"
        super().__init__(message)
