# /// script
# requires-python = ">=3.12"
# dependencies = [
#     "gitpython",
#     "rich",
# ]
# ///
"""
Thin wrapper around the git commands used by the batch sync.

Every command returns the captured text of git. A failing repository
never raises, it simply produces an empty string.
"""

from pathlib import Path

import git
from rich.markup import escape

from git_common import GitOptions

SUPPORTED_COMMANDS = ("fetch", "status", "pull")

# Status text is matched literally, so git must not translate it,
# and git must never wait for credentials.
GIT_ENVIRONMENT = {"LANG": "C", "LC_ALL": "C", "GIT_TERMINAL_PROMPT": "0"}


def execute_git_command(path: Path, command: str, options: GitOptions | None = None) -> str:
    """
    Run a git command inside a repository and return its output.

    Parameters
    ----------
    path : Path
        The repository to run the command in.
    command : str
        One of SUPPORTED_COMMANDS.
    options : GitOptions, optional
        Options for the git operation, by default None

    Returns
    -------
    str
        Standard output and standard error of git, or an empty string
        if the command failed.

    Raises
    ------
    ValueError
        If the command is not supported.
    """
    if command not in SUPPORTED_COMMANDS:
        raise ValueError(f"Unsupported git command: {command}")
    if options is None:
        options = GitOptions()

    repo = git.Git(path)
    repo.update_environment(**GIT_ENVIRONMENT)

    try:
        _, stdout, stderr = getattr(repo, command)(with_extended_output=True)
    except (git.exc.CommandError, OSError) as e:
        if options.verbose and options.console:
            options.console.print(
                f"[red]✗[/red] git {command} failed in [bold]{Path(path).name}[/bold]: {escape(str(e))}"
            )
        return ""

    return "\n".join(part for part in (stdout, stderr) if part).strip()
