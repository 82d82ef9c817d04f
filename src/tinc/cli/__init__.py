"""Command-line interface for tinc."""
