"""Materialize add-source dependencies into the ``<name>/<revision>`` cache.

Each entry is staged in a private temporary directory below the cache root,
checked for package identity, and published with a single ``rename``. An
existing destination is never touched: if another process published the same
key first, the staged copy is discarded and the existing entry is reused.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from tinc.addsource.identity import check_cabal_name
from tinc.addsource.resolver import is_git_rev
from tinc.constants.cache import STAGING_DIR_PREFIX
from tinc.exceptions import InvalidReferenceError, ProcessError
from tinc.io import directory_fingerprint
from tinc.parsers import is_package_name
from tinc.process import Cabal, Git
from tinc.types import GitOrigin, LocalOrigin, Origin, ResolvedDependency, describe_origin

logger = logging.getLogger(__name__)


def add_source_path(cache_dir: Path, dependency: ResolvedDependency) -> Path:
    """Return the cache entry path for *dependency*."""
    return cache_dir / dependency.name / dependency.revision


def cache_add_source_dep(
    cache_dir: Path,
    name: str,
    origin: Origin,
    *,
    git: Git,
    cabal: Cabal,
) -> ResolvedDependency:
    """Ensure ``<cache_dir>/<name>/<revision>`` exists for *origin* and return its key.

    Git origins must already carry a pinned revision; a cached revision is
    returned without running any command. Local origins are always exported
    with ``cabal sdist`` since their revision is the fingerprint of the export.
    """
    if not is_package_name(name):
        raise ValueError(f"invalid package name {name!r}")

    cache_dir.mkdir(parents=True, exist_ok=True)

    with tempfile.TemporaryDirectory(dir=cache_dir, prefix=STAGING_DIR_PREFIX) as staging:
        tmp = Path(staging) / name
        tmp.mkdir()

        try:
            match origin:
                case GitOrigin(url=url, ref=revision):
                    if not is_git_rev(revision):
                        raise InvalidReferenceError(revision, url)
                    dependency = ResolvedDependency(name=name, revision=revision)
                    if add_source_path(cache_dir, dependency).is_dir():
                        logger.debug("Cache hit for %s-%s", name, revision)
                        return dependency
                    git.clone(url, tmp)
                    git.reset_hard(tmp, revision)
                    git.remove_metadata(tmp)
                case LocalOrigin(directory=directory):
                    cabal.sdist(directory, tmp)
                    dependency = ResolvedDependency(name=name, revision=directory_fingerprint(tmp))
        except ProcessError as exc:
            raise ProcessError(
                exc.command,
                exc.returncode,
                exc.output,
                cwd=exc.cwd,
                context=f"while fetching {name} from the {describe_origin(origin)}",
            ) from exc

        move_to_add_source_cache(cache_dir, tmp, origin, dependency)

    return dependency


def move_to_add_source_cache(
    cache_dir: Path,
    source: Path,
    origin: Origin,
    dependency: ResolvedDependency,
) -> None:
    """Check *source*'s identity and publish it as the cache entry for *dependency*."""
    check_cabal_name(source, dependency.name, origin)

    destination = add_source_path(cache_dir, dependency)
    if destination.exists():
        logger.debug("Reusing cached %s-%s", dependency.name, dependency.revision)
        return

    destination.parent.mkdir(parents=True, exist_ok=True)
    try:
        source.rename(destination)
    except OSError:
        if not destination.is_dir():
            raise
        logger.info("Another process published %s-%s first; reusing it", dependency.name, dependency.revision)
        return

    logger.info("Added %s-%s to %s", dependency.name, dependency.revision, cache_dir)
