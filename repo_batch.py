"""
Batch fetch, status and pull over the repositories of a scan.

Every operation is a generator: git runs for one repository at a time,
only when the consumer asks for the next element.
"""

from pathlib import Path
from typing import Callable, Dict, Iterator, Tuple

from git_command import execute_git_command
from repo_scanner import RepositoryScanner

FAST_FORWARD_MARKER = "can be fast-forwarded"

GitExecutor = Callable[[Path, str], str]


def is_pullable(status_text: str) -> bool:
    """True if the status text says the branch can be fast-forwarded."""
    return FAST_FORWARD_MARKER in status_text


class RepositoryBatch:
    """Runs git commands over the repositories of a scanner."""

    def __init__(self, scanner: RepositoryScanner, git_exec: GitExecutor = execute_git_command):
        self._scanner = scanner
        self._git_exec = git_exec

    def fetch(self) -> Iterator[str]:
        """Yield the fetch output of every repository, in scan order."""
        for path in self._scanner.repositories:
            yield self._git_exec(path, "fetch")

    def status(self) -> Iterator[Dict[Path, str]]:
        """Yield a {path: status text} mapping for every repository."""
        for path in self._scanner.repositories:
            yield {path: self._git_exec(path, "status")}

    def pullable(self) -> Iterator[Path]:
        """Yield the repositories whose branch can be fast-forwarded."""
        for path in self._scanner.repositories:
            if is_pullable(self._git_exec(path, "status")):
                yield path

    def pull_results(self) -> Iterator[Tuple[Path, str]]:
        """Yield (path, pull output) for every fast-forwardable repository."""
        for path in self.pullable():
            yield path, self._git_exec(path, "pull")

    def pull(self) -> Iterator[str]:
        """Yield the pull output of every fast-forwardable repository."""
        for _, output in self.pull_results():
            yield output
