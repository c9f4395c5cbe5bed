"""
Categorize shows and movies using the Jellyfin naming scheme.

Shows live in directories like "Series Name (2018) [tvdbid-65567]" holding
season directories like "Season 01", whose episodes are labeled like
"Series Name S01E01.mkv". Movies are labeled like
"Film (2018) [tmdbid-65567].mkv".
"""

import logging
import shutil
from pathlib import Path

from .constants import DIR_MODE, MOVIE_FORMAT
from .errors import InvalidMovie, InvalidShow, MediaPathError
from .executor import execute_plan
from .models import RenamePlan, Show
from .planner import plan_addition, plan_season
from .utils import parse_number
from .validation import require_directory, require_file

logger = logging.getLogger(__name__)


def make_show(name: str, year: str | int, tvdb_id: str | int, directory: Path) -> Path:
    """
    Create a show directory like "Series Name (2018) [tvdbid-65567]".

    Missing parent directories are created and an existing show directory
    is left as is.

    Returns:
        Path of the show directory
    """
    if not name:
        raise InvalidShow("empty show name")
    try:
        year = parse_number(year)
    except ValueError as e:
        raise InvalidShow(f"invalid year: {e}") from None
    try:
        tvdb_id = parse_number(tvdb_id)
    except ValueError as e:
        raise InvalidShow(f"invalid TVDB id: {e}") from None

    show = Show(name=name, year=year, tvdb_id=tvdb_id, directory=Path(directory))
    try:
        show.path.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
    except OSError as e:
        raise MediaPathError(
            show.path, f"cannot create show directory {str(show.path)!r}: {e}"
        ) from e
    logger.info("Created show directory %s", show.path)
    return show.path


def add_movie(
    name: str, year: str | int, tmdb_id: str | int, directory: Path, file: Path
) -> Path:
    """
    Move a movie into a directory, labeled like "Film (2018) [tmdbid-65567].mkv".

    Returns:
        New path of the movie
    """
    if not name:
        raise InvalidMovie("empty movie name")
    try:
        year = parse_number(year)
    except ValueError as e:
        raise InvalidMovie(f"invalid year: {e}") from None
    try:
        tmdb_id = parse_number(tmdb_id)
    except ValueError as e:
        raise InvalidMovie(f"invalid TMDB id: {e}") from None

    directory = require_directory(Path(directory))
    file = require_file(Path(file), "movie")

    target = directory / MOVIE_FORMAT.format(
        name=name, year=year, id=tmdb_id, ext=file.suffix
    )
    if target.exists():
        raise MediaPathError(target, f"{str(target)!r} already exists")
    try:
        shutil.move(file, target)
    except OSError as e:
        raise MediaPathError(file, f"cannot move {str(file)!r}: {e}") from e
    logger.info("Moved %s -> %s", file, target)
    return target


def make_season(
    number: str | int,
    show_dir: Path,
    episodes: list[Path],
    match_index: int = 0,
    include_show_name: bool = True,
    show_progress: bool = False,
) -> RenamePlan:
    """
    Create a season directory and move episodes into it, numbered from 1.

    Episodes are labeled like "Series Name S01E01.mkv" and ordered by the
    number at `match_index` among the digit runs of their filenames.

    Returns:
        The executed plan
    """
    plan = plan_season(number, show_dir, episodes, match_index, include_show_name)
    execute_plan(plan, show_progress=show_progress)
    return plan


def add_episodes(
    season_dir: Path,
    episodes: list[Path],
    match_index: int = 0,
    include_show_name: bool = True,
    show_progress: bool = False,
) -> RenamePlan:
    """
    Add episodes to a season directory, continuing at the previous episode.

    Returns:
        The executed plan
    """
    plan = plan_addition(season_dir, episodes, match_index, include_show_name)
    execute_plan(plan, show_progress=show_progress)
    return plan
