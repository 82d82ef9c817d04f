"""Errors raised while resolving and caching add-source dependencies."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from tinc.exceptions.base import TincError
from tinc.types.dependency import Origin, describe_origin


class InvalidReferenceError(TincError):
    """Raised when a git reference does not name a revision in the remote."""

    def __init__(self, ref: str, url: str) -> None:
        self.ref = ref
        self.url = url
        super().__init__(f"invalid reference {ref!r} for git repository {url}")


class ManifestNotFoundError(TincError):
    """Raised when a materialized source tree has no ``.cabal`` file."""

    def __init__(self, origin: Origin) -> None:
        self.origin = origin
        super().__init__(f"Couldn't find .cabal file in {describe_origin(origin)}")


class AmbiguousManifestError(TincError):
    """Raised when a materialized source tree has more than one ``.cabal`` file."""

    def __init__(self, origin: Origin, files: Sequence[Path] = ()) -> None:
        self.origin = origin
        self.files = tuple(files)
        names = ", ".join(path.name for path in self.files)
        suffix = f" ({names})" if names else ""
        super().__init__(f"Multiple cabal files found in {describe_origin(origin)}{suffix}")


class NameMismatchError(TincError):
    """Raised when the cached package declares a different name than requested."""

    def __init__(self, origin: Origin, declared_name: str, expected_name: str) -> None:
        self.origin = origin
        self.declared_name = declared_name
        self.expected_name = expected_name
        super().__init__(
            f"the {describe_origin(origin)} contains package {declared_name!r}, expected: {expected_name!r}"
        )
