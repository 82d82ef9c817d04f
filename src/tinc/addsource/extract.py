"""Collect add-source dependencies from the command line and ``package.yaml``."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

from tinc.addsource.cache import cache_add_source_dep
from tinc.addsource.resolver import resolve_git_ref
from tinc.constants.manifest import PACKAGE_CONFIG_FILENAME
from tinc.parsers import read_package_config, unique_by_name
from tinc.process import Cabal, Git
from tinc.types import DependencySpec, GitOrigin, LocalOrigin, ResolvedDependency

logger = logging.getLogger(__name__)


def extract_add_source_dependencies(
    cache_dir: Path,
    additional_deps: Sequence[DependencySpec],
    *,
    root: Path,
    git: Git,
    cabal: Cabal,
) -> list[ResolvedDependency]:
    """Resolve and cache every add-source dependency, in declaration order.

    The first failure aborts the whole extraction.
    """
    dependencies = parse_add_source_dependencies(additional_deps, root=root)
    resolved = resolve_git_references(git, dependencies)
    return [
        cache_add_source_dep(cache_dir, dependency.name, dependency.origin, git=git, cabal=cabal)
        for dependency in resolved
        if dependency.origin is not None
    ]


def parse_add_source_dependencies(additional_deps: Sequence[DependencySpec], *, root: Path) -> list[DependencySpec]:
    """Merge explicit and ``package.yaml`` dependencies and keep the add-source ones.

    Explicit dependencies come first, so they shadow manifest entries with the
    same name.
    """
    config_path = root / PACKAGE_CONFIG_FILENAME
    package_deps: tuple[DependencySpec, ...] = ()
    if config_path.is_file():
        package_deps = read_package_config(config_path).dependencies

    merged = unique_by_name([*additional_deps, *package_deps])
    add_source = [dependency for dependency in merged if dependency.is_add_source]
    logger.debug("Found %d add-source dependencies", len(add_source))
    return add_source


def resolve_git_references(git: Git, dependencies: Sequence[DependencySpec]) -> list[DependencySpec]:
    """Pin every git origin to a revision; local origins pass through."""
    resolved: list[DependencySpec] = []
    for dependency in dependencies:
        match dependency.origin:
            case GitOrigin(url=url, ref=ref):
                pinned = GitOrigin(url=url, ref=resolve_git_ref(git, url, ref))
                resolved.append(replace(dependency, origin=pinned))
            case LocalOrigin() | None:
                resolved.append(dependency)
    return resolved
