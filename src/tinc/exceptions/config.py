"""Configuration-related exceptions."""

from __future__ import annotations

from tinc.exceptions.base import TincError


class ConfigError(TincError, ValueError):
    """Raised when tinc configuration is invalid."""
