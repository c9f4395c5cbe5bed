"""Validation of directory names and input paths."""

from pathlib import Path

from .constants import SEASON_PREFIX, YEAR_SEP
from .errors import (
    InvalidShowDirectory,
    InvalidSeasonDirectory,
    MediaPathError,
    NoEpisodesFound,
)
from .models import MediaItem
from .utils import parse_number


def parse_show_dir(path: Path) -> str:
    """
    Return the show name encoded in a show directory name.

    "The Office (2005) [tvdbid-73244]" -> "The Office"

    Raises:
        InvalidShowDirectory: If the name has no " (" separator or no name before it
    """
    name, sep, _ = path.name.partition(YEAR_SEP)
    if not sep or not name:
        raise InvalidShowDirectory(path)
    return name


def parse_season_dir(path: Path) -> int:
    """
    Return the season number encoded in a season directory name.

    "Season 03" -> 3

    Raises:
        InvalidSeasonDirectory: If the prefix is missing or the rest is not a number
    """
    base = path.name
    if not base.startswith(SEASON_PREFIX):
        raise InvalidSeasonDirectory(path)
    try:
        return parse_number(base[len(SEASON_PREFIX) :])
    except ValueError:
        raise InvalidSeasonDirectory(path) from None


def require_directory(path: Path, what: str = "directory") -> Path:
    """
    Check that a path exists and is a directory.

    Raises:
        MediaPathError: If the path is missing or is not a directory
    """
    try:
        is_dir = path.is_dir()
        exists = is_dir or path.exists()
    except OSError as e:
        raise MediaPathError(path, f"invalid {what} {str(path)!r}: {e}") from e
    if not exists:
        raise MediaPathError(path, f"invalid {what}: {str(path)!r} does not exist")
    if not is_dir:
        raise MediaPathError(path, f"{str(path)!r} is not a directory")
    return path


def require_file(path: Path, what: str = "file") -> Path:
    """
    Check that a path exists and is not a directory.

    Raises:
        MediaPathError: If the path is missing or is a directory
    """
    try:
        exists = path.exists()
        is_dir = exists and path.is_dir()
    except OSError as e:
        raise MediaPathError(path, f"invalid {what} {str(path)!r}: {e}") from e
    if not exists:
        raise MediaPathError(path, f"invalid {what}: {str(path)!r} does not exist")
    if is_dir:
        raise MediaPathError(path, f"{str(path)!r} is a directory")
    return path


def validate_episode_files(paths: list[Path]) -> list[MediaItem]:
    """
    Turn input paths into media items, checking each is an existing file.

    Raises:
        NoEpisodesFound: If no paths are given
        MediaPathError: If a path is missing or is a directory
    """
    if not paths:
        raise NoEpisodesFound()
    return [MediaItem(require_file(Path(p), "episode")) for p in paths]
