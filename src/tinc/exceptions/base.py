"""Root exception type."""

from __future__ import annotations


class TincError(Exception):
    """Base class for all errors raised by tinc."""
