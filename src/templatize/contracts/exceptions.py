"""Exception hierarchy for templatize.

All templatize exceptions inherit from :class:`TemplatizeError`, so callers can
catch any library error with a single ``except`` clause while still handling
specific failure modes.
"""

from __future__ import annotations

from pathlib import Path


class TemplatizeError(Exception):
    """Base exception for all templatize errors."""


class ConfigError(TemplatizeError):
    """Options or template configuration failed validation."""


class TargetExistsError(TemplatizeError):
    """The target directory already exists."""

    def __init__(self, target: Path) -> None:
        super().__init__(f"target directory already exists: {target}")
        self.target = target


class MissingStructureError(TemplatizeError):
    """An expected directory is absent from the cloned template."""

    def __init__(self, path: Path, *, kind: str = "directory") -> None:
        super().__init__(f"{kind} not found: {path}")
        self.path = path


class CloneError(TemplatizeError):
    """The version-control checkout failed or could not be started."""

    def __init__(self, message: str, *, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


class FileProcessingError(TemplatizeError):
    """A file could not be read or written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"processing {path}: {reason}")
        self.path = path
        self.reason = reason


class InvalidTransitionError(TemplatizeError):
    """A materialization phase was requested from the wrong state."""
