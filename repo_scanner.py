"""
Find the git repositories directly below a root directory.
"""

from pathlib import Path
from typing import Callable, List

from rich.console import Console

from git_common import REPOSITORY_MARKER, get_subdirectories, is_git_repository


class RepositoryScanner:
    """Holds the sorted list of repositories found by the last scan."""

    operation_name = "scan"

    def __init__(
        self,
        config_reader: Callable[[], Path],
        marker: str = REPOSITORY_MARKER,
        error_console: Console | None = None,
    ):
        self._config_reader = config_reader
        self._marker = marker
        self._error_console = error_console or Console(stderr=True)
        self._repositories: List[Path] = []

    @property
    def repositories(self) -> List[Path]:
        """Repositories of the last scan, empty before the first one."""
        return list(self._repositories)

    def scan(self) -> List[Path]:
        """
        Rebuild the list of repositories below the configured root.

        The root is read from the configuration on every call. Plain files
        and directories without the marker entry are skipped. If the root
        cannot be listed, the list is cleared and the error is reported on
        the error console instead of being raised.

        Returns
        -------
        List[Path]
            The repositories sorted by path.
        """
        root = self._config_reader()
        try:
            subdirectories = get_subdirectories(root)
        except OSError as e:
            self._repositories = []
            self._report_error(e)
            return []

        found = [root / path.name for path in subdirectories if is_git_repository(path, self._marker)]
        self._repositories = sorted(found, key=str)
        return self.repositories

    def _report_error(self, error: OSError) -> None:
        self._error_console.print(
            f"{self.operation_name} error: {error}",
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )
