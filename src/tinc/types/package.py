"""Installed package records and the package graph built from package databases."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from tinc.constants.sandbox import PACKAGE_ID_PATTERN


@dataclass(frozen=True, order=True)
class Package:
    """An installed package identified by name and version."""

    name: str
    version: str

    def __str__(self) -> str:
        return f"{self.name}-{self.version}"

    @classmethod
    def parse(cls, package_id: str) -> Package:
        """Parse ``name-version`` (e.g. ``hspec-core-2.2.3``) into a package."""
        match = PACKAGE_ID_PATTERN.match(package_id.strip())
        if match is None:
            raise ValueError(f"not a package id: {package_id!r}")
        return cls(name=match.group("name"), version=match.group("version"))


@dataclass(frozen=True)
class PackageGraph:
    """Installed packages and their "depends on" edges."""

    edges: Mapping[Package, frozenset[Package]] = field(default_factory=dict)

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[Package, Iterable[Package]]]) -> PackageGraph:
        merged: dict[Package, set[Package]] = {}
        for package, dependencies in edges:
            deps = merged.setdefault(package, set())
            for dependency in dependencies:
                deps.add(dependency)
                merged.setdefault(dependency, set())
        return cls(edges={package: frozenset(deps) for package, deps in merged.items()})

    @property
    def packages(self) -> tuple[Package, ...]:
        return tuple(sorted(self.edges))

    def dependencies(self, package: Package) -> frozenset[Package]:
        return self.edges.get(package, frozenset())

    def __contains__(self, package: object) -> bool:
        return package in self.edges

    def __len__(self) -> int:
        return len(self.edges)


@dataclass(frozen=True)
class CacheSnapshot:
    """Global packages plus one package graph per cached sandbox."""

    global_packages: tuple[Package, ...]
    package_graphs: tuple[tuple[Path, PackageGraph], ...]
