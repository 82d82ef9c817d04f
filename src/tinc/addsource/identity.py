"""Verify that a materialized source tree contains the expected package."""

from __future__ import annotations

from pathlib import Path

from tinc.constants.manifest import CABAL_FILE_SUFFIX
from tinc.exceptions import AmbiguousManifestError, ManifestNotFoundError, NameMismatchError
from tinc.parsers import read_cabal_package_name
from tinc.types import Origin


def find_cabal_file(directory: Path, origin: Origin) -> Path:
    """Return the single top-level ``.cabal`` file in *directory*."""
    cabal_files = sorted(
        path
        for path in directory.iterdir()
        if path.is_file() and path.name.endswith(CABAL_FILE_SUFFIX) and path.name != CABAL_FILE_SUFFIX
    )
    match cabal_files:
        case [cabal_file]:
            return cabal_file
        case []:
            raise ManifestNotFoundError(origin)
        case _:
            raise AmbiguousManifestError(origin, cabal_files)


def determine_package_name(directory: Path, origin: Origin) -> str:
    return read_cabal_package_name(find_cabal_file(directory, origin))


def check_cabal_name(directory: Path, expected_name: str, origin: Origin) -> None:
    """Raise ``NameMismatchError`` unless *directory* declares *expected_name*."""
    name = determine_package_name(directory, origin)
    if name != expected_name:
        raise NameMismatchError(origin, name, expected_name)
