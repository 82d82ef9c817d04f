"""Manifest filenames and field names."""

from __future__ import annotations

import re

PACKAGE_CONFIG_FILENAME: str = "package.yaml"
CABAL_FILE_SUFFIX: str = ".cabal"
GITHUB_URL_PREFIX: str = "https://github.com/"

# hpack sections that carry their own ``dependencies`` list.
SINGLE_SECTION_KEYS: tuple[str, ...] = ("library",)
NAMED_SECTION_KEYS: tuple[str, ...] = ("executables", "tests", "benchmarks")

CABAL_NAME_FIELD_PATTERN: re.Pattern[str] = re.compile(r"^name\s*:\s*(?P<value>\S+)\s*$", re.IGNORECASE)
CABAL_COMMENT_PREFIX: str = "--"
DEPENDENCY_NAME_PATTERN: re.Pattern[str] = re.compile(r"^\s*(?P<name>[A-Za-z0-9][A-Za-z0-9-]*)(?P<rest>.*)$")
PACKAGE_NAME_PATTERN: re.Pattern[str] = re.compile(r"^[A-Za-z0-9]+(?:-[A-Za-z0-9]+)*$")
