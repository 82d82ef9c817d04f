"""Configuration model for tinc."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from tinc.constants.config import (
    ADD_SOURCE_CACHE_DIRNAME,
    DEFAULT_CABAL_EXECUTABLE,
    DEFAULT_CACHE_DIR,
    DEFAULT_GHC_EXECUTABLE,
    DEFAULT_GHC_PKG_EXECUTABLE,
    DEFAULT_GIT_EXECUTABLE,
    SANDBOX_CACHE_DIRNAME,
)


@dataclass(frozen=True)
class TincConfig:
    """Normalized tinc configuration."""

    cache_dir: Path = DEFAULT_CACHE_DIR.expanduser()
    git: str = DEFAULT_GIT_EXECUTABLE
    cabal: str = DEFAULT_CABAL_EXECUTABLE
    ghc: str = DEFAULT_GHC_EXECUTABLE
    ghc_pkg: str = DEFAULT_GHC_PKG_EXECUTABLE

    @property
    def add_source_cache(self) -> Path:
        """Directory holding ``<name>/<revision>`` source trees."""
        return self.cache_dir / ADD_SOURCE_CACHE_DIRNAME

    @property
    def sandbox_cache(self) -> Path:
        """Directory holding one subdirectory per cached sandbox."""
        return self.cache_dir / SANDBOX_CACHE_DIRNAME
