"""Parsing of add-source dependencies given on the command line."""

from __future__ import annotations

import argparse
from pathlib import Path

from tinc.constants.manifest import GITHUB_URL_PREFIX
from tinc.parsers import is_package_name
from tinc.types import DependencySpec, GitOrigin, LocalOrigin

DEPENDENCY_FORMS = "NAME=git:URL@REF, NAME=github:OWNER/REPO@REF or NAME=path:DIR"


def parse_dependency_arg(value: str) -> DependencySpec:
    """Parse ``name=git:url@ref``, ``name=github:owner/repo@ref`` or ``name=path:dir``."""
    name, sep, source = value.partition("=")
    name = name.strip()
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected {DEPENDENCY_FORMS}, got {value!r}")
    if not is_package_name(name):
        raise argparse.ArgumentTypeError(f"invalid package name {name!r}")

    kind, sep, location = source.partition(":")
    if not sep or not location:
        raise argparse.ArgumentTypeError(f"expected {DEPENDENCY_FORMS}, got {value!r}")

    if kind in ("git", "github"):
        url, sep, ref = location.rpartition("@")
        if not sep or not url or not ref:
            raise argparse.ArgumentTypeError(f"git dependency {name!r} requires @REF")
        if kind == "github":
            url = GITHUB_URL_PREFIX + url
        return DependencySpec(name=name, origin=GitOrigin(url=url, ref=ref))
    if kind == "path":
        return DependencySpec(name=name, origin=LocalOrigin(directory=Path(location).expanduser().resolve()))
    raise argparse.ArgumentTypeError(f"unknown source kind {kind!r} for {name!r}")
