"""Shared test fixtures for templatize tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fakes.git import FakeGit
from tests.fakes.progress import RecordingProgress
from tests.fakes.template import write_template_tree


@pytest.fixture
def template_source(tmp_path: Path) -> Path:
    """A directory that looks like a fresh checkout of the go-native template."""
    return write_template_tree(tmp_path / "upstream")


@pytest.fixture
def fake_git(template_source: Path) -> FakeGit:
    return FakeGit(source=template_source)


@pytest.fixture
def recording_progress() -> RecordingProgress:
    return RecordingProgress()
