"""Dependency and origin records for add-source resolution."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias


@dataclass(frozen=True)
class GitOrigin:
    """A git repository plus a branch, tag, or revision within it."""

    url: str
    ref: str


@dataclass(frozen=True)
class LocalOrigin:
    """A package source directory on the local filesystem."""

    directory: Path


Origin: TypeAlias = GitOrigin | LocalOrigin


@dataclass(frozen=True)
class DependencySpec:
    """A declared dependency; ``origin`` is ``None`` for plain registry packages."""

    name: str
    origin: Origin | None = None
    constraint: str = ""

    @property
    def is_add_source(self) -> bool:
        return self.origin is not None


@dataclass(frozen=True)
class ResolvedDependency:
    """An add-source dependency pinned to an immutable revision."""

    name: str
    revision: str


def describe_origin(origin: Origin) -> str:
    """Return a human-readable subject for error messages."""
    match origin:
        case GitOrigin(url=url):
            return f"git repository {url}"
        case LocalOrigin(directory=directory):
            return f"directory {directory}"
