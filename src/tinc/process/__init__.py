"""External command wrappers (git, cabal, ghc, ghc-pkg)."""

from .cabal import Cabal
from .ghc import GhcPkg, parse_ghc_info, parse_package_dump, read_ghc_info
from .git import Git
from .runner import ProcessRunner, SubprocessRunner

__all__ = [
    "Cabal",
    "GhcPkg",
    "Git",
    "ProcessRunner",
    "SubprocessRunner",
    "parse_ghc_info",
    "parse_package_dump",
    "read_ghc_info",
]
