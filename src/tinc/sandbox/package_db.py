"""Locate cached sandboxes and their package databases."""

from __future__ import annotations

from pathlib import Path

from tinc.constants.sandbox import CABAL_SANDBOX_DIRNAME, PACKAGE_DB_SUFFIX
from tinc.exceptions import AmbiguousPackageDbError, PackageDbNotFoundError


def lookup_sandboxes(cache_dir: Path) -> list[Path]:
    """Return the sandbox directories directly below *cache_dir*, sorted by name."""
    if not cache_dir.is_dir():
        return []
    return sorted(path for path in cache_dir.iterdir() if path.is_dir())


def find_package_db(sandbox: Path) -> Path:
    """Return the canonical path of the sandbox's ``*-packages.conf.d`` directory."""
    sandbox_dir = sandbox / CABAL_SANDBOX_DIRNAME
    candidates: list[Path] = []
    if sandbox_dir.is_dir():
        candidates = sorted(path for path in sandbox_dir.iterdir() if path.is_dir() and is_package_db(path.name))

    match candidates:
        case [package_db]:
            return package_db.resolve()
        case []:
            raise PackageDbNotFoundError(sandbox_dir)
        case _:
            raise AmbiguousPackageDbError(sandbox_dir, candidates)


def is_package_db(name: str) -> bool:
    return name.endswith(PACKAGE_DB_SUFFIX)
