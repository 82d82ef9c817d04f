"""Queries against ``ghc`` and ``ghc-pkg``."""

from __future__ import annotations

import ast
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from tinc.constants.config import DEFAULT_GHC_EXECUTABLE, DEFAULT_GHC_PKG_EXECUTABLE
from tinc.constants.sandbox import (
    DUMP_RECORD_SEPARATOR,
    GHC_INFO_GLOBAL_DB_KEY,
    GHC_INFO_PLATFORM_KEY,
    GHC_INFO_VERSION_KEY,
    INSTALLED_ID_HASH_PATTERN,
)
from tinc.exceptions import ProcessError
from tinc.process.runner import ProcessRunner
from tinc.types import GhcInfo, Package, PackageGraph

logger = logging.getLogger(__name__)


def read_ghc_info(runner: ProcessRunner, executable: str = DEFAULT_GHC_EXECUTABLE) -> GhcInfo:
    """Run ``ghc --info`` and extract version, platform and global package db."""
    command = [executable, "--info"]
    output = runner.read(command)
    info = parse_ghc_info(output)
    try:
        return GhcInfo(
            version=info[GHC_INFO_VERSION_KEY],
            global_package_db=Path(info[GHC_INFO_GLOBAL_DB_KEY]),
            platform=info.get(GHC_INFO_PLATFORM_KEY, ""),
        )
    except KeyError as exc:
        raise ProcessError(command, 0, f"missing field {exc.args[0]!r} in ghc --info output") from exc


def parse_ghc_info(output: str) -> dict[str, str]:
    """Parse the ``[("key","value"), ...]`` list printed by ``ghc --info``."""
    try:
        pairs = ast.literal_eval(output.strip())
    except (SyntaxError, ValueError) as exc:
        raise ProcessError(["ghc", "--info"], 0, f"unparseable output: {exc}") from exc
    if not isinstance(pairs, list):
        raise ProcessError(["ghc", "--info"], 0, "unparseable output: expected a list")
    return {str(key): str(value) for key, value in pairs}


class GhcPkg:
    """Package database reader backed by ``ghc-pkg``."""

    def __init__(self, runner: ProcessRunner, executable: str = DEFAULT_GHC_PKG_EXECUTABLE) -> None:
        self.runner = runner
        self.executable = executable

    def list_global_packages(self) -> tuple[Package, ...]:
        """Return packages installed in the global package database."""
        output = self.runner.read([self.executable, "list", "--global", "--simple-output"])
        packages: set[Package] = set()
        for token in output.split():
            package = _parse_installed_id(token.strip("(){}"))
            if package is not None:
                packages.add(package)
        return tuple(sorted(packages))

    def read_package_graph(self, package_dbs: Sequence[Path]) -> PackageGraph:
        """Build a package graph from the union of *package_dbs*."""
        args = [self.executable, "dump", "--no-user-package-db"]
        args.extend(f"--package-db={db}" for db in package_dbs)
        return parse_package_dump(self.runner.read(args))


def parse_package_dump(output: str) -> PackageGraph:
    """Parse ``ghc-pkg dump`` records into a package graph."""
    records = list(_iter_dump_records(output))

    packages_by_id: dict[str, Package] = {}
    for record in records:
        package = Package(name=record["name"], version=record["version"])
        packages_by_id[record.get("id", str(package))] = package

    edges: list[tuple[Package, list[Package]]] = []
    for record in records:
        package = Package(name=record["name"], version=record["version"])
        dependencies: list[Package] = []
        for dependency_id in record.get("depends", "").split():
            dependency = packages_by_id.get(dependency_id) or _parse_installed_id(dependency_id)
            if dependency is None:
                logger.debug("Skipping unrecognized dependency id %r of %s", dependency_id, package)
                continue
            dependencies.append(dependency)
        edges.append((package, dependencies))
    return PackageGraph.from_edges(edges)


def _iter_dump_records(output: str) -> Iterable[dict[str, str]]:
    fields: dict[str, str] = {}
    current: str | None = None
    for line in output.splitlines():
        if line.strip() == DUMP_RECORD_SEPARATOR:
            if "name" in fields and "version" in fields:
                yield fields
            fields, current = {}, None
            continue
        if not line.strip():
            continue
        if line[0].isspace():
            if current is not None:
                fields[current] = f"{fields[current]} {line.strip()}".strip()
            continue
        key, sep, value = line.partition(":")
        if not sep:
            continue
        current = key.strip().lower()
        fields[current] = value.strip()
    if "name" in fields and "version" in fields:
        yield fields


def _parse_installed_id(installed_id: str) -> Package | None:
    match = INSTALLED_ID_HASH_PATTERN.match(installed_id)
    if match is None:
        return None
    try:
        return Package.parse(match.group("package"))
    except ValueError:
        return None
