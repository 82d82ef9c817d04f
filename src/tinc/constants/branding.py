"""CLI text constants."""

from __future__ import annotations

CLI_DESCRIPTION: str = (
    "Resolve add-source dependencies (git refs and local directories) into an\n"
    "immutable cache and inspect the package databases of cached sandboxes."
)
