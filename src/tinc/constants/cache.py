"""Add-source cache layout constants."""

from __future__ import annotations

FILE_HASH_CHUNK_SIZE: int = 1024 * 1024
STAGING_DIR_PREFIX: str = "tmp"
GIT_METADATA_DIRNAME: str = ".git"
GIT_REV_LENGTH: int = 40
GIT_REV_ALPHABET: frozenset[str] = frozenset("0123456789abcdef")
