"""Manifest readers."""

from .cabal import read_cabal_package_name
from .hpack import PackageConfig, is_package_name, parse_dependencies, read_package_config, unique_by_name

__all__ = [
    "PackageConfig",
    "is_package_name",
    "parse_dependencies",
    "read_cabal_package_name",
    "read_package_config",
    "unique_by_name",
]
