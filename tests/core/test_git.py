"""Tests for the git subprocess wrapper."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from templatize.contracts.exceptions import CloneError
from templatize.core.git import GitClient

URL = "https://github.com/brightsidedeveloper/go-native-template"


def _completed(returncode: int = 0) -> subprocess.CompletedProcess[bytes]:
    return subprocess.CompletedProcess(args=[], returncode=returncode)


class TestClone:
    def test_runs_git_clone_without_capturing_output(self, tmp_path: Path) -> None:
        target = tmp_path / "acme"

        with patch("templatize.core.git.subprocess.run", return_value=_completed()) as run:
            GitClient().clone(URL, target)

        run.assert_called_once_with(["git", "clone", URL, str(target)], check=False)

    def test_custom_executable(self, tmp_path: Path) -> None:
        with patch("templatize.core.git.subprocess.run", return_value=_completed()) as run:
            GitClient(executable="/usr/local/bin/git").clone(URL, tmp_path / "acme")

        assert run.call_args.args[0][0] == "/usr/local/bin/git"

    def test_non_zero_exit_raises(self, tmp_path: Path) -> None:
        with patch("templatize.core.git.subprocess.run", return_value=_completed(128)):
            with pytest.raises(CloneError) as exc_info:
                GitClient().clone(URL, tmp_path / "acme")

        assert exc_info.value.returncode == 128
        assert "status 128" in str(exc_info.value)

    def test_missing_executable_raises(self, tmp_path: Path) -> None:
        with patch("templatize.core.git.subprocess.run", side_effect=FileNotFoundError("git not found")):
            with pytest.raises(CloneError, match="failed to execute git"):
                GitClient().clone(URL, tmp_path / "acme")


class TestRemoveMetadata:
    def test_removes_git_directory(self, tmp_path: Path) -> None:
        (tmp_path / ".git" / "objects").mkdir(parents=True)
        (tmp_path / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
        (tmp_path / "main.go").write_text("package main\n")

        assert GitClient().remove_metadata(tmp_path) is True
        assert not (tmp_path / ".git").exists()
        assert (tmp_path / "main.go").exists()

    def test_removes_gitfile(self, tmp_path: Path) -> None:
        (tmp_path / ".git").write_text("gitdir: /srv/repo.git/worktrees/acme\n")

        assert GitClient().remove_metadata(tmp_path) is True
        assert not (tmp_path / ".git").exists()

    def test_absent_git_directory_is_fine(self, tmp_path: Path) -> None:
        assert GitClient().remove_metadata(tmp_path) is True

    def test_failure_is_logged_not_raised(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        (tmp_path / ".git").mkdir()

        with caplog.at_level(logging.WARNING, logger="templatize.core.git"):
            with patch("templatize.core.git.shutil.rmtree", side_effect=PermissionError("denied")):
                assert GitClient().remove_metadata(tmp_path) is False

        assert "could not remove .git directory" in caplog.text
