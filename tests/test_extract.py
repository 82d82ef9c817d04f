"""Tests for merging, resolving and caching add-source dependencies."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from conftest import FakeRunner
from tinc.addsource import extract_add_source_dependencies, parse_add_source_dependencies, resolve_git_references
from tinc.exceptions import InvalidReferenceError, NameMismatchError
from tinc.process import Cabal, Git
from tinc.types import DependencySpec, GitOrigin, LocalOrigin, ResolvedDependency

URL_A = "https://example/a.git"
URL_B = "https://example/b.git"
REV_1 = "1" * 40
REV_2 = "2" * 40
MAIN_REV = "abc1230000000000000000000000000000000def"


def _write_package_yaml(root: Path, text: str) -> None:
    root.mkdir(parents=True, exist_ok=True)
    (root / "package.yaml").write_text(text, encoding="utf-8")


def test_explicit_dependency_overrides_manifest_entry(tmp_path: Path) -> None:
    _write_package_yaml(
        tmp_path,
        f"""
name: app
dependencies:
  - base
  - name: a
    git: {URL_A}
    ref: {REV_2}
  - name: b
    git: {URL_B}
    ref: {REV_1}
""",
    )
    explicit = [DependencySpec(name="a", origin=GitOrigin(URL_A, REV_1))]

    deps = parse_add_source_dependencies(explicit, root=tmp_path)

    assert deps == [
        DependencySpec(name="a", origin=GitOrigin(URL_A, REV_1)),
        DependencySpec(name="b", origin=GitOrigin(URL_B, REV_1)),
    ]


def test_registry_dependencies_are_dropped(tmp_path: Path) -> None:
    explicit = [DependencySpec(name="a", origin=GitOrigin(URL_A, REV_1))]
    _write_package_yaml(tmp_path, "dependencies:\n  - base >= 4 && < 5\n  - name: a\n    path: ../a\n")

    deps = parse_add_source_dependencies([*explicit, DependencySpec(name="text", constraint=">= 1.2")], root=tmp_path)

    assert [dep.name for dep in deps] == ["a"]


def test_missing_package_yaml_uses_explicit_only(tmp_path: Path) -> None:
    explicit = [DependencySpec(name="a", origin=LocalOrigin(tmp_path / "a"))]

    assert parse_add_source_dependencies(explicit, root=tmp_path) == explicit


def test_resolve_git_references_pins_refs(runner: FakeRunner, git: Git, tmp_path: Path) -> None:
    runner.remotes[(URL_A, "main")] = f"{MAIN_REV}\trefs/heads/main\n"
    local = DependencySpec(name="b", origin=LocalOrigin(tmp_path))

    resolved = resolve_git_references(git, [DependencySpec(name="a", origin=GitOrigin(URL_A, "main")), local])

    assert resolved == [DependencySpec(name="a", origin=GitOrigin(URL_A, MAIN_REV)), local]


def test_extract_caches_each_dependency_in_order(
    tmp_path: Path, runner: FakeRunner, git: Git, cabal: Cabal, make_package: Callable[..., Path]
) -> None:
    runner.repositories[URL_A] = make_package("mypkg")
    runner.remotes[(URL_A, "main")] = f"{MAIN_REV}\trefs/heads/main\n"
    local_source = make_package("other")
    project = tmp_path / "project"
    _write_package_yaml(project, f"dependencies:\n  - name: other\n    path: {local_source}\n")
    cache_dir = tmp_path / "cache"

    resolved = extract_add_source_dependencies(
        cache_dir,
        [DependencySpec(name="mypkg", origin=GitOrigin(URL_A, "main"))],
        root=project,
        git=git,
        cabal=cabal,
    )

    assert [dep.name for dep in resolved] == ["mypkg", "other"]
    assert resolved[0] == ResolvedDependency(name="mypkg", revision=MAIN_REV)
    assert (cache_dir / "mypkg" / MAIN_REV / "mypkg.cabal").is_file()
    assert (cache_dir / "other" / resolved[1].revision / "other.cabal").is_file()


def test_extract_second_run_only_resolves_refs(
    tmp_path: Path, runner: FakeRunner, git: Git, cabal: Cabal, make_package: Callable[..., Path]
) -> None:
    runner.repositories[URL_A] = make_package("mypkg")
    runner.remotes[(URL_A, "main")] = f"{MAIN_REV}\trefs/heads/main\n"
    deps = [DependencySpec(name="mypkg", origin=GitOrigin(URL_A, "main"))]
    cache_dir = tmp_path / "cache"
    first = extract_add_source_dependencies(cache_dir, deps, root=tmp_path, git=git, cabal=cabal)
    runner.calls.clear()

    second = extract_add_source_dependencies(cache_dir, deps, root=tmp_path, git=git, cabal=cabal)

    assert second == first
    assert [command[:2] for command, _ in runner.calls] == [("git", "ls-remote")]


def test_extract_aborts_on_first_failure(
    tmp_path: Path, runner: FakeRunner, git: Git, cabal: Cabal, make_package: Callable[..., Path]
) -> None:
    runner.repositories[URL_A] = make_package("wrong-name")
    runner.repositories[URL_B] = make_package("b")
    deps = [
        DependencySpec(name="a", origin=GitOrigin(URL_A, REV_1)),
        DependencySpec(name="b", origin=GitOrigin(URL_B, REV_2)),
    ]

    with pytest.raises(NameMismatchError):
        extract_add_source_dependencies(tmp_path / "cache", deps, root=tmp_path, git=git, cabal=cabal)

    assert runner.count("git", "clone") == 1
    assert not (tmp_path / "cache" / "b").exists()


def test_extract_fails_before_caching_on_unresolvable_ref(
    tmp_path: Path, runner: FakeRunner, git: Git, cabal: Cabal
) -> None:
    deps = [DependencySpec(name="a", origin=GitOrigin(URL_A, "gone"))]

    with pytest.raises(InvalidReferenceError):
        extract_add_source_dependencies(tmp_path / "cache", deps, root=tmp_path, git=git, cabal=cabal)

    assert runner.count("git", "clone") == 0
