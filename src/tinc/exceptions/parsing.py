"""Parsing-related exceptions."""

from __future__ import annotations

from tinc.exceptions.base import TincError


class ManifestParseError(TincError, ValueError):
    """Raised when a ``package.yaml`` or ``.cabal`` file cannot be parsed."""
