"""Shared file I/O helpers."""

from .files import directory_fingerprint, file_sha256

__all__ = ["directory_fingerprint", "file_sha256"]
