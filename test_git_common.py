"""
Tests für git_common.py
"""

from pathlib import Path
from unittest import mock

import pytest

from git_common import get_subdirectories, is_git_repository


def test_is_git_repository_with_git_dir(tmp_path):
    """Ein Ordner mit .git Verzeichnis ist ein Repository."""
    (tmp_path / ".git").mkdir()

    assert is_git_repository(tmp_path) is True


def test_is_git_repository_without_marker(tmp_path):
    """Ein Ordner ohne .git ist kein Repository."""
    (tmp_path / "src").mkdir()

    assert is_git_repository(tmp_path) is False


def test_is_git_repository_for_file(tmp_path):
    """Eine Datei ist nie ein Repository."""
    file_path = tmp_path / "file.txt"
    file_path.write_text("content", encoding="utf-8")

    assert is_git_repository(file_path) is False


def test_is_git_repository_custom_marker(tmp_path):
    """Der Marker kann angepasst werden."""
    (tmp_path / ".hg").mkdir()

    assert is_git_repository(tmp_path, ".hg") is True
    assert is_git_repository(tmp_path) is False


def test_get_subdirectories_skips_files(tmp_path):
    """Nur Ordner werden zurückgegeben."""
    (tmp_path / "a").mkdir()
    (tmp_path / "b").mkdir()
    (tmp_path / "c.txt").write_text("", encoding="utf-8")

    assert sorted(path.name for path in get_subdirectories(tmp_path)) == ["a", "b"]


def test_get_subdirectories_missing_path(tmp_path):
    """Ein fehlender Pfad löst einen OSError aus."""
    with pytest.raises(OSError):
        get_subdirectories(tmp_path / "missing")


def test_is_git_repository_permission_denied(tmp_path):
    """Ein Ordner, der nicht durchsucht werden darf, ist kein Repository."""
    (tmp_path / ".git").mkdir()

    with mock.patch.object(Path, "exists", side_effect=PermissionError(13, "Permission denied")):
        assert is_git_repository(tmp_path) is False
