"""Configuration loading and normalization for tinc."""

from __future__ import annotations

from tinc.config.loader import load_config
from tinc.config.model import TincConfig

__all__ = ["TincConfig", "load_config"]
