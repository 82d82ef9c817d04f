"""Constant values shared across tinc modules."""
