"""tinc: content-addressed cache for add-source dependencies."""

__version__ = "0.1.0"
