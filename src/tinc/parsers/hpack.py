"""Reader for hpack ``package.yaml`` project manifests."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from tinc.constants.manifest import (
    DEPENDENCY_NAME_PATTERN,
    GITHUB_URL_PREFIX,
    NAMED_SECTION_KEYS,
    PACKAGE_NAME_PATTERN,
    SINGLE_SECTION_KEYS,
)
from tinc.exceptions import ManifestParseError
from tinc.types import DependencySpec, GitOrigin, LocalOrigin, Origin

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackageConfig:
    """The parts of ``package.yaml`` relevant to dependency resolution."""

    name: str | None
    dependencies: tuple[DependencySpec, ...]


def read_package_config(path: Path) -> PackageConfig:
    """Read a ``package.yaml`` file and collect dependencies from every section.

    Dependencies are returned in file order (top level, ``library``, then the
    named sections), deduplicated by name with the first occurrence kept.
    """
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ManifestParseError(f"Invalid YAML in {path}: {exc}") from exc
    except OSError as exc:
        raise ManifestParseError(f"Cannot read {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ManifestParseError(f"{path} must be a YAML mapping")

    name = raw.get("name")
    if name is not None and not isinstance(name, str):
        raise ManifestParseError(f"{path}: name must be a string")

    base_dir = path.parent
    collected: list[DependencySpec] = []
    collected.extend(parse_dependencies(raw.get("dependencies"), base_dir=base_dir, context="dependencies"))

    for key in SINGLE_SECTION_KEYS:
        section = raw.get(key)
        if isinstance(section, dict):
            collected.extend(
                parse_dependencies(section.get("dependencies"), base_dir=base_dir, context=f"{key}.dependencies")
            )

    for key in NAMED_SECTION_KEYS:
        sections = raw.get(key)
        if sections is None:
            continue
        if not isinstance(sections, dict):
            raise ManifestParseError(f"{path}: {key} must be a mapping")
        for section_name, section in sections.items():
            if isinstance(section, dict):
                collected.extend(
                    parse_dependencies(
                        section.get("dependencies"),
                        base_dir=base_dir,
                        context=f"{key}.{section_name}.dependencies",
                    )
                )

    return PackageConfig(name=name, dependencies=tuple(unique_by_name(collected)))


def parse_dependencies(value: Any, *, base_dir: Path, context: str = "dependencies") -> list[DependencySpec]:
    """Parse an hpack ``dependencies`` value (list or mapping form)."""
    if value is None:
        return []
    if isinstance(value, str):
        return [_parse_string_dependency(value, context)]
    if isinstance(value, list):
        return [_parse_dependency_item(item, base_dir=base_dir, context=context) for item in value]
    if isinstance(value, dict):
        deps: list[DependencySpec] = []
        for name, spec in value.items():
            if not isinstance(name, str) or not is_package_name(name):
                raise ManifestParseError(f"{context}: invalid package name {name!r}")
            if spec is None or isinstance(spec, str):
                deps.append(DependencySpec(name=name, constraint=(spec or "").strip()))
            elif isinstance(spec, dict):
                deps.append(_parse_source_mapping(name, spec, base_dir=base_dir, context=f"{context}.{name}"))
            else:
                raise ManifestParseError(f"{context}.{name}: expected a version constraint or a mapping")
        return deps
    raise ManifestParseError(f"{context} must be a list or a mapping")


def is_package_name(name: str) -> bool:
    """Return True for a cabal package name such as ``hspec-core``."""
    return PACKAGE_NAME_PATTERN.match(name) is not None


def unique_by_name(dependencies: list[DependencySpec]) -> list[DependencySpec]:
    """Drop later dependencies whose name was already seen."""
    seen: set[str] = set()
    unique: list[DependencySpec] = []
    for dependency in dependencies:
        if dependency.name in seen:
            continue
        seen.add(dependency.name)
        unique.append(dependency)
    return unique


def _parse_dependency_item(item: Any, *, base_dir: Path, context: str) -> DependencySpec:
    if isinstance(item, str):
        return _parse_string_dependency(item, context)
    if isinstance(item, dict):
        name = item.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ManifestParseError(f"{context}: dependency mapping requires a 'name'")
        return _parse_source_mapping(name.strip(), item, base_dir=base_dir, context=f"{context}.{name.strip()}")
    raise ManifestParseError(f"{context}: unsupported dependency entry {item!r}")


def _parse_string_dependency(text: str, context: str) -> DependencySpec:
    match = DEPENDENCY_NAME_PATTERN.match(text)
    if match is None:
        raise ManifestParseError(f"{context}: invalid dependency {text!r}")
    return DependencySpec(name=match.group("name"), constraint=match.group("rest").strip())


def _parse_source_mapping(name: str, spec: dict[str, Any], *, base_dir: Path, context: str) -> DependencySpec:
    if not is_package_name(name):
        raise ManifestParseError(f"{context}: invalid package name {name!r}")
    constraint = spec.get("version", "")
    if not isinstance(constraint, str):
        raise ManifestParseError(f"{context}: version must be a string")
    return DependencySpec(
        name=name,
        origin=_parse_origin(spec, base_dir=base_dir, context=context),
        constraint=constraint.strip(),
    )


def _parse_origin(spec: dict[str, Any], *, base_dir: Path, context: str) -> Origin | None:
    github = spec.get("github")
    git = spec.get("git")
    local = spec.get("path")

    present = [key for key, value in (("github", github), ("git", git), ("path", local)) if value is not None]
    if len(present) > 1:
        raise ManifestParseError(f"{context}: only one of {', '.join(present)} may be given")

    if spec.get("subdir") is not None:
        logger.debug("%s: ignoring subdir %r", context, spec.get("subdir"))

    if github is not None or git is not None:
        location = github if github is not None else git
        if not isinstance(location, str) or not location.strip():
            raise ManifestParseError(f"{context}: {present[0]} must be a non-empty string")
        ref = spec.get("ref")
        if not isinstance(ref, str) or not ref.strip():
            raise ManifestParseError(f"{context}: git dependencies require a 'ref'")
        url = GITHUB_URL_PREFIX + location.strip() if github is not None else location.strip()
        return GitOrigin(url=url, ref=ref.strip())

    if local is not None:
        if not isinstance(local, str) or not local.strip():
            raise ManifestParseError(f"{context}: path must be a non-empty string")
        directory = Path(local.strip()).expanduser()
        if not directory.is_absolute():
            directory = base_dir / directory
        return LocalOrigin(directory=directory.resolve())

    return None
