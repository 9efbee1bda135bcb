# /// script
# requires-python = ">=3.12"
# dependencies = [
#     "click",
#     "gitpython",
#     "rich",
# ]
# ///
from dataclasses import dataclass
from functools import partial
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from git_command import execute_git_command
from git_common import REPOSITORY_MARKER, GitOptions
from repo_batch import RepositoryBatch, is_pullable
from repo_config import ConfigError, read_config, save_config
from repo_scanner import RepositoryScanner


@dataclass
class SyncState:
    """Objects shared by all sub commands."""

    options: GitOptions
    scanner: RepositoryScanner
    batch: RepositoryBatch
    config_file: Path | None = None


def root_reader(root: Path | None, config_file: Path | None):
    """
    Create the function the scanner uses to look up the root directory.

    Parameters
    ----------
    root : Path | None
        Root given on the command line, takes precedence over the config.
    config_file : Path | None
        Config file to read when no root is given.
    """
    if root is not None:
        absolute_root = root.expanduser().absolute()
        return lambda: absolute_root
    return partial(read_config, config_file)


def scan_repositories(state: SyncState) -> list[Path]:
    """Scan the root directory and report what was found."""
    console = state.options.console
    try:
        repositories = state.scanner.scan()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    if state.options.verbose and console:
        console.print(f"[blue]ℹ[/blue] Found {len(repositories)} git repositories")
    if not repositories and console:
        console.print("[yellow]![/yellow] No git repositories found.")
    return repositories


def first_line(text: str) -> str:
    lines = text.strip().splitlines()
    return lines[0] if lines else ""


def print_output(console: Console, title: str, output: str, verbose: bool) -> None:
    """Print the output of a git command, blank output is rendered as a notice."""
    if not output:
        console.print(f"[yellow]-[/yellow] {title}: [dim]no output[/dim]")
        return
    if verbose:
        console.print(Panel(escape(output), title=title, expand=False))
        return
    console.print(f"[green]✓[/green] {title}: {escape(first_line(output))}")


def print_summary(scanned: int, fetched: int, pulled: int, console: Console) -> None:
    """
    Print a summary table of the sync run.

    Parameters
    ----------
    scanned : int
        Number of repositories found.
    fetched : int
        Number of fetch operations that produced output.
    pulled : int
        Number of repositories that were pulled.
    console : Console
        Rich console for formatted output.
    """
    table = Table(title="Summary")
    table.add_column("Status", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Repositories", f"{scanned}")
    table.add_row("Fetched with output", f"[blue]{fetched}[/blue]")
    table.add_row("Pulled", f"[green]{pulled}[/green]")

    console.print(table)


@click.group()
@click.option(
    "--root",
    "-r",
    type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
    default=None,
    help="Directory with the git repositories (overrides the config)",
)
@click.option(
    "--config",
    "-c",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path of the JSON config file",
)
@click.option(
    "--marker",
    "-m",
    default=REPOSITORY_MARKER,
    show_default=True,
    help="Entry that marks a directory as git repository",
)
@click.option("--verbose", "-v", is_flag=True, help="Show detailed output")
@click.pass_context
def main(ctx: click.Context, root: Path | None, config_file: Path | None, marker: str, verbose: bool):
    """
    Fetch, inspect and pull all git repositories in a directory.

    Only the immediate subdirectories of the root directory are checked.
    """
    console = Console()
    options = GitOptions(console=console, verbose=verbose)
    scanner = RepositoryScanner(root_reader(root, config_file), marker=marker)
    batch = RepositoryBatch(scanner, partial(execute_git_command, options=options))
    ctx.obj = SyncState(options=options, scanner=scanner, batch=batch, config_file=config_file)

    if verbose:
        console.print(f"[blue]ℹ[/blue] Verbose mode: [green]{verbose}[/green]")
        console.print(f"[blue]ℹ[/blue] Repository marker: [green]{escape(marker)}[/green]")


@main.command("config")
@click.argument("root", type=click.Path(file_okay=False, dir_okay=True, path_type=Path))
@click.pass_obj
def config_command(state: SyncState, root: Path):
    """Store ROOT as the default directory with git repositories."""
    try:
        written = save_config(root, state.config_file)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
    state.options.console.print(f"[green]✓[/green] Saved root directory to [bold]{escape(str(written))}[/bold]")


@main.command("list")
@click.pass_obj
def list_command(state: SyncState):
    """List the git repositories in the root directory."""
    repositories = scan_repositories(state)
    if not repositories:
        return

    table = Table(title="Repositories")
    table.add_column("Name", style="bold")
    table.add_column("Path", style="cyan")
    for path in repositories:
        table.add_row(escape(path.name), escape(str(path)))
    state.options.console.print(table)


@main.command("fetch")
@click.pass_obj
def fetch_command(state: SyncState):
    """Fetch all repositories."""
    repositories = scan_repositories(state)
    console = state.options.console
    for path, output in zip(repositories, state.batch.fetch()):
        print_output(console, f"Fetched [bold]{escape(path.name)}[/bold]", output, state.options.verbose)


@main.command("status")
@click.pass_obj
def status_command(state: SyncState):
    """Show the status of all repositories."""
    if not scan_repositories(state):
        return

    table = Table(title="Status")
    table.add_column("Repository", style="bold")
    table.add_column("Pullable", justify="center")
    table.add_column("Status")
    for record in state.batch.status():
        for path, text in record.items():
            pullable = "[green]yes[/green]" if is_pullable(text) else "no"
            table.add_row(escape(path.name), pullable, escape(first_line(text)) or "[dim]skipped[/dim]")
    state.options.console.print(table)


@main.command("pull")
@click.pass_obj
def pull_command(state: SyncState):
    """Pull all repositories that can be fast-forwarded."""
    if not scan_repositories(state):
        return

    console = state.options.console
    pulled = 0
    for path, output in state.batch.pull_results():
        pulled += 1
        print_output(console, f"Pulled [bold]{escape(path.name)}[/bold]", output, state.options.verbose)
    if pulled == 0:
        console.print("[blue]ℹ[/blue] Nothing to pull, all repositories are up to date.")


@main.command("sync")
@click.pass_obj
def sync_command(state: SyncState):
    """Fetch all repositories and pull the ones that can be fast-forwarded."""
    repositories = scan_repositories(state)
    console = state.options.console
    verbose = state.options.verbose

    fetched = 0
    for path, output in zip(repositories, state.batch.fetch()):
        if output:
            fetched += 1
        if verbose:
            print_output(console, f"Fetched [bold]{escape(path.name)}[/bold]", output, verbose)

    pulled = 0
    for path, output in state.batch.pull_results():
        pulled += 1
        print_output(console, f"Pulled [bold]{escape(path.name)}[/bold]", output, verbose)

    print_summary(len(repositories), fetched, pulled, console)


if __name__ == "__main__":
    main()
