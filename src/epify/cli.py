"""CLI interface for epify and trdone."""

import sys
from pathlib import Path
from typing import Optional

import typer
from InquirerPy import inquirer
from rich.markup import escape

from . import __version__
from .constants import (
    DEFAULT_MATCH_INDEX,
    MATCH_INDEX_ENV,
    TORRENT_DIR_ENV,
    TORRENT_NAME_ENV,
)
from .errors import EpifyError, RenameError
from .executor import execute_plan
from .logging_config import get_logger, init_logger
from .media import add_movie, make_show
from .models import RenamePlan, TorrentFile
from .planner import display_rename_plan, plan_addition, plan_season
from .torrent import rename_torrent
from .utils import console

app = typer.Typer(
    name="epify",
    help="Categorize shows and movies using the Jellyfin naming scheme",
    add_completion=False,
    no_args_is_help=True,
)

trdone_app = typer.Typer(
    name="trdone",
    help="Organize completed torrent downloads",
    add_completion=False,
)


def version_callback(value: bool):
    if value:
        console.print(f"epify version {__version__}")
        raise typer.Exit()


def _fail(e: EpifyError):
    logger = get_logger()
    if logger:
        logger.debug("Command failed", exc_info=e)
    console.print(f"[red]Error: {escape(str(e))}[/red]")
    if isinstance(e, RenameError):
        for job, error in e.failures[1:]:
            console.print(
                f"  [dim]- episode {job.episode}: {escape(str(error))}[/dim]"
            )
        console.print(
            f"[yellow]{e.moved} episode(s) were moved anyway; "
            f"check the season directory.[/yellow]"
        )
    sys.exit(1)


def _confirm_and_execute(plan: RenamePlan, yes: bool):
    """Show the plan, ask for confirmation, then move the episodes."""
    display_rename_plan(plan)
    if not yes and not inquirer.confirm(message="Proceed?", default=True).execute():
        console.print("[yellow]Aborted.[/yellow]")
        sys.exit(0)

    logger = get_logger()
    if logger:
        logger.info(
            "Moving %d episode(s) into %s", len(plan.jobs), plan.season_dir
        )
    moved = execute_plan(plan)
    console.print(
        f"[bold green]Complete![/bold green] "
        f"{moved} episode(s) moved to {escape(str(plan.season_dir))}"
    )


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Log every step to stderr",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Write a detailed log to this file",
    ),
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """
    Categorize shows and movies using the Jellyfin naming scheme.

    Shows live in directories like "Series Name (2018) [tvdbid-65567]",
    seasons in "Season 01" and episodes are labeled like
    "Series Name S01E01.mkv".
    """
    init_logger(log_file, verbose)


@app.command()
def show(
    name: str = typer.Argument(..., help="Show name"),
    year: str = typer.Argument(..., help="Year the show premiered"),
    tvdbid: str = typer.Argument(..., help="TVDB id of the show"),
    directory: Path = typer.Argument(..., help="Directory to create the show in"),
):
    """Create a show directory like "Series Name (2018) [tvdbid-65567]"."""
    try:
        path = make_show(name, year, tvdbid, directory)
    except EpifyError as e:
        _fail(e)
    console.print(f"Created {escape(str(path))}")


@app.command()
def movie(
    name: str = typer.Argument(..., help="Movie name"),
    year: str = typer.Argument(..., help="Year the movie premiered"),
    tmdbid: str = typer.Argument(..., help="TMDB id of the movie"),
    directory: Path = typer.Argument(..., help="Directory to add the movie to"),
    file: Path = typer.Argument(..., help="Movie file"),
):
    """Add a movie to a directory, labeled like "Film (2018) [tmdbid-65567]"."""
    try:
        path = add_movie(name, year, tmdbid, directory, file)
    except EpifyError as e:
        _fail(e)
    console.print(f"Moved to {escape(str(path))}")


@app.command()
def season(
    number: str = typer.Argument(..., help="Season number"),
    show_dir: Path = typer.Argument(..., help="Show directory"),
    episodes: list[Path] = typer.Argument(..., help="Episode files"),
    match_index: int = typer.Option(
        DEFAULT_MATCH_INDEX,
        "--match-index",
        "-m",
        envvar=MATCH_INDEX_ENV,
        help="Index of the episode number among the numbers in filenames",
    ),
    bare: bool = typer.Option(
        False,
        "--bare",
        help='Label episodes "S01E01.mkv" without the show name',
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
):
    """Populate a new season directory with episodes numbered from 1."""
    try:
        plan = plan_season(
            number, show_dir, episodes, match_index, include_show_name=not bare
        )
        _confirm_and_execute(plan, yes)
    except EpifyError as e:
        _fail(e)


@app.command()
def add(
    season_dir: Path = typer.Argument(..., help="Season directory"),
    episodes: list[Path] = typer.Argument(..., help="Episode files"),
    match_index: int = typer.Option(
        DEFAULT_MATCH_INDEX,
        "--match-index",
        "-m",
        envvar=MATCH_INDEX_ENV,
        help="Index of the episode number among the numbers in filenames",
    ),
    bare: bool = typer.Option(
        False,
        "--bare",
        help='Label episodes "S01E01.mkv" without the show name',
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
):
    """Add episodes to a season directory, continuing at the previous episode."""
    try:
        plan = plan_addition(
            season_dir, episodes, match_index, include_show_name=not bare
        )
        _confirm_and_execute(plan, yes)
    except EpifyError as e:
        _fail(e)


@trdone_app.command()
def trdone(
    directory: Path = typer.Argument(..., help="Directory holding the show directories"),
    torrent_dir: Optional[Path] = typer.Option(
        None,
        "--torrent-dir",
        envvar=TORRENT_DIR_ENV,
        help="Directory of the completed download",
    ),
    torrent_name: Optional[str] = typer.Option(
        None,
        "--torrent-name",
        envvar=TORRENT_NAME_ENV,
        help="Name of the completed download",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Write a detailed log to this file",
    ),
):
    """
    Move a completed download into the latest season of its show.

    Meant for Transmission's script-torrent-done hook, which defines
    $TR_TORRENT_DIR and $TR_TORRENT_NAME.
    """
    init_logger(log_file)
    if torrent_dir is None:
        console.print(f"[red]Error: ${TORRENT_DIR_ENV} is not defined[/red]")
        sys.exit(1)
    if not torrent_name:
        console.print(f"[red]Error: ${TORRENT_NAME_ENV} is not defined[/red]")
        sys.exit(1)

    torrent = TorrentFile(directory=torrent_dir, name=torrent_name, destination=directory)
    try:
        path = rename_torrent(torrent)
    except EpifyError as e:
        _fail(e)
    console.print(f"Moved to {escape(str(path))}")


if __name__ == "__main__":
    app()
