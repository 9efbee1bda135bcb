"""
Common Git functionalities for the batch sync scripts.

This module contains the options class and the repository detection
helpers shared by the scanner, the git command wrapper and the CLI.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from rich.console import Console

REPOSITORY_MARKER = ".git"


@dataclass
class GitOptions:
    """Base class for Git operation options."""

    console: Optional[Console] = None  # Console object for output
    verbose: bool = False  # Show verbose output


def is_git_repository(path: Path, marker: str = REPOSITORY_MARKER) -> bool:
    """
    Checks if a directory is a Git repository.

    Worktrees and submodules use a `.git` file instead of a directory,
    so any entry with the marker name counts. A directory that cannot be
    searched is not a repository.

    Args:
        path: Path to the directory to check
        marker: Name of the entry that marks a repository

    Returns:
        True if the directory is a Git repository, otherwise False
    """
    try:
        return path.is_dir() and (path / marker).exists()
    except OSError:
        return False


def get_subdirectories(path: Path) -> List[Path]:
    """
    Returns all subdirectories of the specified path.

    Args:
        path: Path where to search for subdirectories

    Returns:
        List of found subdirectories

    Raises:
        OSError: If the path cannot be listed
    """
    return [item for item in path.iterdir() if item.is_dir()]
