"""Cached sandbox discovery and package database aggregation."""

from .package_db import find_package_db, is_package_db, lookup_sandboxes
from .snapshot import read_cache

__all__ = ["find_package_db", "is_package_db", "lookup_sandboxes", "read_cache"]
