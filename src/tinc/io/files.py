"""File-level helpers for hashing directory trees."""

from __future__ import annotations

import hashlib
import os
from pathlib import Path

from tinc.constants.cache import FILE_HASH_CHUNK_SIZE


def file_sha256(path: Path) -> str:
    """Return SHA-256 hex digest for a file."""
    digest = hashlib.sha256()
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(FILE_HASH_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def directory_fingerprint(directory: Path) -> str:
    """Return a content hash for every file below *directory*.

    Relative paths and file contents contribute; timestamps and permissions
    do not. Symlinks contribute their target string, and empty directories
    are not part of the fingerprint.
    """
    digest = hashlib.sha256()
    for relative, path in _iter_entries(directory):
        if path.is_symlink():
            content = "link:" + hashlib.sha256(os.fsencode(os.readlink(path))).hexdigest()
        else:
            content = file_sha256(path)
        digest.update(os.fsencode(relative))
        digest.update(b"\0")
        digest.update(content.encode("ascii"))
        digest.update(b"\n")
    return digest.hexdigest()


def _iter_entries(directory: Path) -> list[tuple[str, Path]]:
    entries = [
        (path.relative_to(directory).as_posix(), path)
        for path in directory.rglob("*")
        if path.is_symlink() or path.is_file()
    ]
    return sorted(entries)
