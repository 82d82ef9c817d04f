"""Sandbox and package database naming conventions."""

from __future__ import annotations

import re

CABAL_SANDBOX_DIRNAME: str = ".cabal-sandbox"
PACKAGE_DB_SUFFIX: str = "-packages.conf.d"

GHC_INFO_GLOBAL_DB_KEY: str = "Global Package DB"
GHC_INFO_VERSION_KEY: str = "Project version"
GHC_INFO_PLATFORM_KEY: str = "Target platform"

PACKAGE_ID_PATTERN: re.Pattern[str] = re.compile(r"^(?P<name>.+)-(?P<version>[0-9]+(?:\.[0-9]+)*)$")
# ghc-pkg appends an ABI hash to installed package ids: ``text-1.2.2.1-5QpmrLQO``.
INSTALLED_ID_HASH_PATTERN: re.Pattern[str] = re.compile(r"^(?P<package>.+-[0-9]+(?:\.[0-9]+)*)(?:-[A-Za-z0-9]+)?$")
DUMP_RECORD_SEPARATOR: str = "---"
