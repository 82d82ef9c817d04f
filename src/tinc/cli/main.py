"""CLI entrypoint for tinc."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tinc import __version__
from tinc.addsource import extract_add_source_dependencies
from tinc.cli.args import DEPENDENCY_FORMS, parse_dependency_arg
from tinc.config import TincConfig, load_config
from tinc.constants.branding import CLI_DESCRIPTION
from tinc.exceptions import ConfigError, TincError
from tinc.process import Cabal, GhcPkg, Git, SubprocessRunner, read_ghc_info
from tinc.sandbox import read_cache


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="tinc",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    add_source = subparsers.add_parser("add-source", help="Resolve and cache add-source dependencies")
    add_source.add_argument("-r", "--root", type=Path, default=Path.cwd(), help="Project root containing package.yaml")
    add_source.add_argument("-c", "--config", type=Path, help="Explicit config file")
    add_source.add_argument(
        "dependencies",
        nargs="*",
        type=parse_dependency_arg,
        metavar="DEP",
        help=f"Additional dependency ({DEPENDENCY_FORMS}); overrides package.yaml entries of the same name",
    )
    add_source.add_argument("-v", "--verbose", action="store_true", help="Show external commands")

    cache_info = subparsers.add_parser("cache-info", help="Summarize the package databases of cached sandboxes")
    cache_info.add_argument("-r", "--root", type=Path, default=Path.cwd(), help="Directory to look for tinc.yaml in")
    cache_info.add_argument("-c", "--config", type=Path, help="Explicit config file")
    cache_info.add_argument("-v", "--verbose", action="store_true", help="Show external commands")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(message)s")

    try:
        config = load_config(args.root, args.config)
        if args.command == "add-source":
            return _handle_add_source(args, config)
        if args.command == "cache-info":
            return _handle_cache_info(config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except TincError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    parser.error(f"Unsupported command: {args.command}")
    return 2


def _handle_add_source(args: argparse.Namespace, config: TincConfig) -> int:
    runner = SubprocessRunner()
    resolved = extract_add_source_dependencies(
        config.add_source_cache,
        args.dependencies,
        root=args.root.resolve(),
        git=Git(runner, config.git),
        cabal=Cabal(runner, config.cabal),
    )
    for dependency in resolved:
        print(f"{dependency.name} {dependency.revision}")
    return 0


def _handle_cache_info(config: TincConfig) -> int:
    runner = SubprocessRunner()
    ghc_info = read_ghc_info(runner, config.ghc)
    snapshot = read_cache(ghc_info, config.sandbox_cache, ghc_pkg=GhcPkg(runner, config.ghc_pkg))
    print(f"ghc {ghc_info.version}: {len(snapshot.global_packages)} global packages")
    for package_db, graph in snapshot.package_graphs:
        print(f"{package_db}: {len(graph)} packages")
    return 0
