"""Shared data types for tinc."""

from .dependency import DependencySpec, GitOrigin, LocalOrigin, Origin, ResolvedDependency, describe_origin
from .ghc import GhcInfo
from .package import CacheSnapshot, Package, PackageGraph

__all__ = [
    "CacheSnapshot",
    "DependencySpec",
    "GhcInfo",
    "GitOrigin",
    "LocalOrigin",
    "Origin",
    "Package",
    "PackageGraph",
    "ResolvedDependency",
    "describe_origin",
]
