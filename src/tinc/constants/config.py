"""Configuration defaults and filenames."""

from __future__ import annotations

from pathlib import Path

CONFIG_FILENAME: str = "tinc.yaml"
CACHE_DIR_ENV_VAR: str = "TINC_CACHE_DIR"
DEFAULT_CACHE_DIR: Path = Path("~/.tinc/cache")
ADD_SOURCE_CACHE_DIRNAME: str = "add-source"
SANDBOX_CACHE_DIRNAME: str = "sandboxes"

DEFAULT_GIT_EXECUTABLE: str = "git"
DEFAULT_CABAL_EXECUTABLE: str = "cabal"
DEFAULT_GHC_EXECUTABLE: str = "ghc"
DEFAULT_GHC_PKG_EXECUTABLE: str = "ghc-pkg"

EXECUTABLE_CONFIG_KEYS: tuple[str, ...] = ("git", "cabal", "ghc", "ghc_pkg")
ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"cache_dir", *EXECUTABLE_CONFIG_KEYS})
