"""File enumeration and in-place rewriting for substitution passes."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from templatize.contracts.config import SubstitutionTable
from templatize.contracts.exceptions import FileProcessingError
from templatize.core.substitution import apply_substitutions

logger = logging.getLogger(__name__)

# Undecodable bytes survive a decode/encode round trip unchanged.
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def is_skipped(path: Path, skip_extensions: Iterable[str]) -> bool:
    return path.suffix.lower() in skip_extensions


def _raise_walk_error(exc: OSError) -> None:
    path = Path(exc.filename) if exc.filename else Path()
    raise FileProcessingError(path, exc.strerror or str(exc)) from exc


def collect_tree(root: Path, skip_extensions: Iterable[str] = ()) -> list[Path]:
    """Return every non-directory entry under *root*, minus denylisted extensions.

    Entries are returned in a stable, sorted walk order. A *root* that is a
    file yields just that file (subject to the same denylist).
    """
    skip = frozenset(skip_extensions)
    if not root.is_dir():
        return [] if is_skipped(root, skip) else [root]

    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        dirnames.sort()
        for name in sorted(filenames):
            path = Path(dirpath) / name
            if is_skipped(path, skip):
                logger.debug("Skipping binary file: %s", path)
                continue
            files.append(path)
    return files


def substitute_file(path: Path, table: SubstitutionTable, *, missing_ok: bool = False) -> bool:
    """Rewrite *path* in place with *table*.

    Returns ``True`` when the file was written. Unchanged files are left
    untouched. Raises :class:`FileProcessingError` on any read or write failure,
    except a missing file when *missing_ok* is set.
    """
    try:
        raw = path.read_bytes()
    except FileNotFoundError as exc:
        if missing_ok:
            logger.debug("Optional file not present: %s", path)
            return False
        raise FileProcessingError(path, exc.strerror or str(exc)) from exc
    except OSError as exc:
        raise FileProcessingError(path, exc.strerror or str(exc)) from exc

    original = raw.decode(_ENCODING, _ERRORS)
    result = apply_substitutions(original, table)
    if not result.changed:
        return False

    try:
        path.write_bytes(result.text.encode(_ENCODING, _ERRORS))
    except OSError as exc:
        raise FileProcessingError(path, exc.strerror or str(exc)) from exc
    logger.debug("Rewrote %s", path)
    return True


__all__ = ["collect_tree", "is_skipped", "substitute_file"]
