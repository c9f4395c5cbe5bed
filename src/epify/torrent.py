"""File completed torrent downloads into show directories."""

import logging
from pathlib import Path

from .constants import SEASON_PREFIX, YEAR_SEP
from .errors import MediaPathError, NoSeasonsFound, NoShowsFound
from .media import add_episodes
from .models import TorrentFile
from .validation import parse_season_dir, require_directory

logger = logging.getLogger(__name__)


def _entries(directory: Path) -> list[Path]:
    try:
        return sorted(directory.iterdir())
    except OSError as e:
        raise MediaPathError(
            directory, f"cannot read directory {str(directory)!r}: {e}"
        ) from e


def find_show_dir(root: Path, torrent_name: str) -> Path:
    """
    Find the show directory whose show name appears in a torrent name.

    Entries are checked in name order and the first match wins.
    """
    entries = _entries(root)
    if not entries:
        raise NoShowsFound(f"no shows found in {str(root)!r}")
    for entry in entries:
        if not entry.is_dir():
            continue
        show, sep, _ = entry.name.partition(YEAR_SEP)
        if not sep or not show:
            continue
        if show in torrent_name:
            return entry
    raise NoShowsFound(f"no show directory for {torrent_name!r}")


def find_latest_season_dir(show_dir: Path) -> Path:
    """
    Return the season directory with the highest season number.

    Raises:
        InvalidSeasonDirectory: If a "Season " directory has a non-numeric number
        NoSeasonsFound: If the show has no season directory
    """
    latest: tuple[int, Path] | None = None
    for entry in _entries(show_dir):
        if not entry.is_dir() or not entry.name.startswith(SEASON_PREFIX):
            continue
        number = parse_season_dir(entry)
        if latest is None or number > latest[0]:
            latest = (number, entry)
    if latest is None:
        raise NoSeasonsFound(f"no season directory in {str(show_dir)!r}")
    return latest[1]


def rename_torrent(torrent: TorrentFile) -> Path:
    """
    Move a completed download into the latest season of its show.

    The show is found by name in the torrent name, and the episode continues
    the numbering of the season with the highest number.

    Returns:
        New path of the episode
    """
    root = require_directory(Path(torrent.destination))
    show_dir = find_show_dir(root, torrent.name)
    season_dir = find_latest_season_dir(show_dir)
    logger.info("Filing %s under %s", torrent.name, season_dir)

    plan = add_episodes(season_dir, [torrent.path])
    return plan.jobs[0].target
