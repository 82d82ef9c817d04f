"""Shared pytest fixtures: fake external commands and package source trees."""

from __future__ import annotations

import shutil
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from tinc.exceptions import ProcessError
from tinc.process import Cabal, GhcPkg, Git


class FakeRunner:
    """In-process stand-in for git, cabal, ghc and ghc-pkg.

    ``repositories`` maps clone URLs to source trees, ``remotes`` maps
    ``(url, ref)`` to ``git ls-remote`` output, and ``outputs`` maps
    ``(executable, subcommand)`` to canned stdout.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[tuple[str, ...], Path | None]] = []
        self.repositories: dict[str, Path] = {}
        self.remotes: dict[tuple[str, str], str] = {}
        self.outputs: dict[tuple[str, str], str] = {}

    def read(self, args: Sequence[str], *, cwd: Path | None = None) -> str:
        command = self._record(args, cwd)
        if command[:2] == ("git", "ls-remote"):
            return self.remotes.get((command[2], command[3]), "")
        try:
            return self.outputs[command[:2]]
        except KeyError:
            raise ProcessError(command, 1, "no canned output") from None

    def call(self, args: Sequence[str], *, cwd: Path | None = None) -> None:
        command = self._record(args, cwd)
        match command:
            case ("git", "clone", "--quiet", url, destination):
                source = self.repositories.get(url)
                if source is None:
                    raise ProcessError(command, 128, f"fatal: repository '{url}' not found")
                shutil.copytree(source, destination, dirs_exist_ok=True)
                (Path(destination) / ".git").mkdir()
                (Path(destination) / ".git" / "HEAD").write_text("ref: refs/heads/main\n", encoding="utf-8")
            case ("git", "reset", *_):
                assert cwd is not None and (cwd / ".git").is_dir()
            case ("cabal", "sdist", "--output-directory", destination):
                assert cwd is not None
                if not cwd.is_dir():
                    raise ProcessError(command, 1, f"cabal: {cwd} does not exist")
                shutil.copytree(cwd, destination, dirs_exist_ok=True)
            case _:
                raise ProcessError(command, 1, "unexpected command")

    def count(self, *prefix: str) -> int:
        return sum(1 for command, _ in self.calls if command[: len(prefix)] == prefix)

    def _record(self, args: Sequence[str], cwd: Path | None) -> tuple[str, ...]:
        command = tuple(str(arg) for arg in args)
        self.calls.append((command, cwd))
        return command


class ExplodingRunner:
    """Runner that fails the test if any command is executed."""

    def read(self, args: Sequence[str], *, cwd: Path | None = None) -> str:
        raise AssertionError(f"unexpected command: {list(args)}")

    def call(self, args: Sequence[str], *, cwd: Path | None = None) -> None:
        raise AssertionError(f"unexpected command: {list(args)}")


def write_package(directory: Path, name: str, *, body: str = "main = pure ()\n") -> Path:
    """Create a minimal cabal package named *name* in *directory*."""
    directory.mkdir(parents=True, exist_ok=True)
    (directory / f"{name}.cabal").write_text(
        f"-- generated for tests\nname:          {name}\nversion:       0.1.0\nbuild-type:    Simple\n",
        encoding="utf-8",
    )
    (directory / "src").mkdir(exist_ok=True)
    (directory / "src" / "Main.hs").write_text(body, encoding="utf-8")
    return directory


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def git(runner: FakeRunner) -> Git:
    return Git(runner)


@pytest.fixture
def cabal(runner: FakeRunner) -> Cabal:
    return Cabal(runner)


@pytest.fixture
def ghc_pkg(runner: FakeRunner) -> GhcPkg:
    return GhcPkg(runner)


@pytest.fixture
def exploding_git() -> Git:
    return Git(ExplodingRunner())


@pytest.fixture
def exploding_cabal() -> Cabal:
    return Cabal(ExplodingRunner())


@pytest.fixture
def make_package(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory creating package source trees under ``tmp_path/sources``."""

    def _make(name: str, *, dirname: str | None = None, body: str = "main = pure ()\n") -> Path:
        return write_package(tmp_path / "sources" / (dirname or name), name, body=body)

    return _make
