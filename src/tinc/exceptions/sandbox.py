"""Errors raised while reading cached sandboxes."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from tinc.exceptions.base import TincError


class PackageDbNotFoundError(TincError):
    """Raised when a sandbox directory holds no package database."""

    def __init__(self, sandbox_dir: Path) -> None:
        self.sandbox_dir = sandbox_dir
        super().__init__(f"package db not found in {sandbox_dir}")


class AmbiguousPackageDbError(TincError):
    """Raised when a sandbox directory holds more than one package database."""

    def __init__(self, sandbox_dir: Path, candidates: Sequence[Path]) -> None:
        self.sandbox_dir = sandbox_dir
        self.candidates = tuple(candidates)
        names = ", ".join(path.name for path in self.candidates)
        super().__init__(f"multiple package dbs found in {sandbox_dir}: {names}")
