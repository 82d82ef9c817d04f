"""Assemble a merged view of the global and per-sandbox package databases."""

from __future__ import annotations

import logging
from pathlib import Path

from tinc.process import GhcPkg
from tinc.sandbox.package_db import find_package_db, lookup_sandboxes
from tinc.types import CacheSnapshot, GhcInfo, PackageGraph

logger = logging.getLogger(__name__)


def read_cache(ghc_info: GhcInfo, cache_dir: Path, *, ghc_pkg: GhcPkg) -> CacheSnapshot:
    """Read every cached sandbox into a package graph layered over the global db.

    The filesystem is rescanned on each call; nothing is memoized.
    """
    package_graphs: list[tuple[Path, PackageGraph]] = []
    for sandbox in lookup_sandboxes(cache_dir):
        package_db = find_package_db(sandbox)
        graph = ghc_pkg.read_package_graph([ghc_info.global_package_db, package_db])
        logger.debug("Read %d packages for sandbox %s", len(graph), sandbox.name)
        package_graphs.append((package_db, graph))

    global_packages = ghc_pkg.list_global_packages()
    return CacheSnapshot(global_packages=global_packages, package_graphs=tuple(package_graphs))
