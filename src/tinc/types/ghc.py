"""Compiler facts read from ``ghc --info``."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GhcInfo:
    """The subset of ``ghc --info`` that tinc needs."""

    version: str
    global_package_db: Path
    platform: str = ""
