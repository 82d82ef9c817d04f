"""Minimal reader for the package name declared in a ``.cabal`` file."""

from __future__ import annotations

from pathlib import Path

from tinc.constants.manifest import CABAL_COMMENT_PREFIX, CABAL_NAME_FIELD_PATTERN
from tinc.exceptions import ManifestParseError


def read_cabal_package_name(path: Path) -> str:
    """Return the top-level ``name:`` field of a cabal file."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestParseError(f"Cannot read {path}: {exc}") from exc

    for line in text.lstrip("\ufeff").splitlines():
        if not line or line[0].isspace() or line.startswith(CABAL_COMMENT_PREFIX):
            continue
        match = CABAL_NAME_FIELD_PATTERN.match(line)
        if match is not None:
            return match.group("value")

    raise ManifestParseError(f"No package name field in {path}")
