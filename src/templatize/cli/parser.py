"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("templatize")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="templatize",
        description="Create a new project from the go-native template.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument("--name", default="", help="Project name (required)")
    parser.add_argument("--dir", default="", help="Target directory name (defaults to project name)")
    parser.add_argument(
        "--repo-url",
        default=None,
        help="Template repository to clone (default: $TEMPLATIZE_REPO_URL or the go-native template)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


__all__ = ["build_parser"]
