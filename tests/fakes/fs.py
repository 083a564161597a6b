"""Filesystem failure injection."""

from __future__ import annotations

import os

import pytest


def deny_listing(monkeypatch: pytest.MonkeyPatch, dirname: str) -> None:
    """Make ``os.scandir`` fail with EACCES for any directory named *dirname*."""
    real_scandir = os.scandir

    def _scandir(path: str | os.PathLike[str] = ".") -> object:
        if os.path.basename(os.fspath(path)) == dirname:
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", _scandir)
