"""Build rename plans for populating and extending seasons."""

from pathlib import Path

from rich.markup import escape
from rich.table import Table

from .errors import InvalidSeasonNumber, MediaPathError
from .matcher import sort_episodes
from .models import MediaItem, RenameJob, RenamePlan, Season
from .sequence import episode_offset
from .utils import console, parse_number
from .validation import (
    parse_season_dir,
    parse_show_dir,
    require_directory,
    validate_episode_files,
)


def _build_jobs(
    season: Season,
    season_dir: Path,
    episodes: list[MediaItem],
    offset: int,
    include_show_name: bool,
) -> list[RenameJob]:
    """Assign episode numbers offset+1, offset+2, ... to sorted episodes."""
    jobs: list[RenameJob] = []
    for i, item in enumerate(episodes):
        number = offset + i + 1
        name = season.episode_name(number, item.extension, include_show_name)
        jobs.append(RenameJob(source=item, target=season_dir / name, episode=number))
    return jobs


def plan_season(
    number: str | int,
    show_dir: Path,
    episodes: list[Path],
    match_index: int = 0,
    include_show_name: bool = True,
) -> RenamePlan:
    """
    Plan a new season directory populated with episodes numbered from 1.

    Nothing on disk is changed. All validation happens here so that a bad
    season number, show directory or episode name rejects the batch before
    the season directory is created.

    Args:
        number: Season number
        show_dir: Existing show directory, e.g. "The Office (2005) [tvdbid-73244]"
        episodes: Episode files to move into the season
        match_index: Which number in each filename orders the episodes

    Returns:
        RenamePlan that creates the season directory on execution
    """
    try:
        season_number = parse_number(number)
    except ValueError as e:
        raise InvalidSeasonNumber(f"invalid season: {e}") from None

    show_dir = Path(show_dir)
    require_directory(show_dir, "show directory")
    season = Season(
        number=season_number, show_dir=show_dir, show_name=parse_show_dir(show_dir)
    )

    items = validate_episode_files(episodes)
    ordered = sort_episodes(items, match_index)

    season_dir = season.path
    if season_dir.exists():
        raise MediaPathError(season_dir, f"{str(season_dir)!r} already exists")

    offset = episode_offset(season_dir, fresh=True)
    return RenamePlan(
        season=season,
        season_dir=season_dir,
        jobs=_build_jobs(season, season_dir, ordered, offset, include_show_name),
        create_season_dir=True,
    )


def plan_addition(
    season_dir: Path,
    episodes: list[Path],
    match_index: int = 0,
    include_show_name: bool = True,
) -> RenamePlan:
    """
    Plan adding episodes to an existing season, continuing its numbering.

    The show name comes from the season directory's parent, and numbering
    continues after the episode encoded in the last entry of the season.
    """
    season_dir = Path(season_dir)
    require_directory(season_dir, "season directory")
    season_number = parse_season_dir(season_dir)
    show_dir = season_dir.parent
    season = Season(
        number=season_number, show_dir=show_dir, show_name=parse_show_dir(show_dir)
    )

    items = validate_episode_files(episodes)
    ordered = sort_episodes(items, match_index)

    offset = episode_offset(season_dir)
    return RenamePlan(
        season=season,
        season_dir=season_dir,
        jobs=_build_jobs(season, season_dir, ordered, offset, include_show_name),
    )


def display_rename_plan(plan: RenamePlan):
    """Display the rename plan in a formatted table."""
    title = escape(f"{plan.season.show_name} - {plan.season_dir.name}")
    if plan.create_season_dir:
        title += " (new)"

    table = Table(title=title, show_header=True)
    table.add_column("Ep", style="cyan", justify="right")
    table.add_column("Source", style="white")
    table.add_column("Destination", style="green")

    for job in plan.jobs:
        table.add_row(
            str(job.episode), escape(job.source.name), escape(job.target.name)
        )

    console.print(table)
