"""Shared exception hierarchy for tinc."""

from __future__ import annotations

from .addsource import AmbiguousManifestError, InvalidReferenceError, ManifestNotFoundError, NameMismatchError
from .base import TincError
from .config import ConfigError
from .parsing import ManifestParseError
from .process import ProcessError
from .sandbox import AmbiguousPackageDbError, PackageDbNotFoundError

__all__ = [
    "AmbiguousManifestError",
    "AmbiguousPackageDbError",
    "ConfigError",
    "InvalidReferenceError",
    "ManifestNotFoundError",
    "ManifestParseError",
    "NameMismatchError",
    "PackageDbNotFoundError",
    "ProcessError",
    "TincError",
]
