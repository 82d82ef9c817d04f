"""Resolution and caching of add-source dependencies."""

from .cache import add_source_path, cache_add_source_dep, move_to_add_source_cache
from .extract import extract_add_source_dependencies, parse_add_source_dependencies, resolve_git_references
from .identity import check_cabal_name, determine_package_name, find_cabal_file
from .resolver import is_git_rev, resolve_git_ref

__all__ = [
    "add_source_path",
    "cache_add_source_dep",
    "check_cabal_name",
    "determine_package_name",
    "extract_add_source_dependencies",
    "find_cabal_file",
    "is_git_rev",
    "move_to_add_source_cache",
    "parse_add_source_dependencies",
    "resolve_git_ref",
    "resolve_git_references",
]
