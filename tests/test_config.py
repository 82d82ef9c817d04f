"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from tinc.config import TincConfig, load_config
from tinc.exceptions import ConfigError


def test_load_config_defaults_when_missing(tmp_path: Path) -> None:
    loaded = load_config(tmp_path, environ={})

    assert loaded == TincConfig()
    assert loaded.add_source_cache == loaded.cache_dir / "add-source"
    assert loaded.sandbox_cache == loaded.cache_dir / "sandboxes"


def test_load_config_reads_values(tmp_path: Path) -> None:
    (tmp_path / "tinc.yaml").write_text(
        "cache_dir: build-cache\ngit: /usr/local/bin/git\nghc_pkg: ghc-pkg-8.0\n",
        encoding="utf-8",
    )

    loaded = load_config(tmp_path, environ={})

    assert loaded.cache_dir == (tmp_path / "build-cache").resolve()
    assert loaded.git == "/usr/local/bin/git"
    assert loaded.ghc_pkg == "ghc-pkg-8.0"
    assert loaded.cabal == "cabal"


def test_environment_overrides_cache_dir(tmp_path: Path) -> None:
    (tmp_path / "tinc.yaml").write_text("cache_dir: from-file\n", encoding="utf-8")

    loaded = load_config(tmp_path, environ={"TINC_CACHE_DIR": str(tmp_path / "from-env")})

    assert loaded.cache_dir == (tmp_path / "from-env").resolve()


def test_explicit_missing_config_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(tmp_path, tmp_path / "nope.yaml", environ={})


def test_empty_config_file_uses_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "custom.yaml"
    config_path.write_text("", encoding="utf-8")

    assert load_config(tmp_path, config_path, environ={}) == TincConfig()


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("cache_dir: [\n", "Invalid YAML"),
        ("- cache_dir\n", "must be a YAML mapping"),
        ("cache: x\n", "Unknown config key"),
        ("git: 3\n", "git must be a non-empty string"),
        ("cabal: '  '\n", "cabal must be a non-empty string"),
        ("cache_dir: 12\n", "cache_dir must be a non-empty string"),
    ],
)
def test_invalid_config_raises(tmp_path: Path, text: str, message: str) -> None:
    (tmp_path / "tinc.yaml").write_text(text, encoding="utf-8")

    with pytest.raises(ConfigError, match=message):
        load_config(tmp_path, environ={})
