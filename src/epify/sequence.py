"""Episode numbering continuation for existing seasons."""

import logging
import os
import re
from pathlib import Path

from .constants import EPISODE_MARKER
from .errors import InvalidEpisode, InvalidEpisodeNumber, MediaPathError

logger = logging.getLogger(__name__)


def parse_episode_number(name: str) -> int:
    """
    Return the episode number of an existing episode filename.

    The number is the digits between an "E" marker and the following ".",
    as in "The Office S03E07.mkv" -> 7.

    Raises:
        InvalidEpisode: If there is no "E" followed later by a "."
        InvalidEpisodeNumber: If the text between them is not a number
    """
    pattern = re.compile(re.escape(EPISODE_MARKER) + r"([0-9]+)\.")
    match = pattern.search(name)
    if match:
        return int(match.group(1))

    marker = name.rfind(EPISODE_MARKER)
    dot = name.find(".", marker + 1) if marker != -1 else -1
    if dot == -1:
        raise InvalidEpisode(name)
    raise InvalidEpisodeNumber(name, name[marker + 1 : dot])


def list_season(season_dir: Path) -> list[str]:
    """Entry names of a season directory in name order."""
    try:
        return sorted(os.listdir(season_dir))
    except OSError as e:
        raise MediaPathError(
            season_dir, f"cannot read season directory {str(season_dir)!r}: {e}"
        ) from e


def last_episode_number(entries: list[str]) -> int:
    """
    Return the episode number encoded in the last entry of a season listing.

    An empty listing means no episodes yet (0). Only the name-ordered last
    entry decides; this matches numeric order as long as episode numbers are
    zero-padded to the same width. When another entry encodes a higher
    number a warning is logged instead of guessing.
    """
    if not entries:
        return 0
    ordered = sorted(entries)
    last = parse_episode_number(ordered[-1])

    for name in ordered[:-1]:
        try:
            n = parse_episode_number(name)
        except (InvalidEpisode, InvalidEpisodeNumber):
            continue
        if n > last:
            logger.warning(
                "%r sorts before %r but has a higher episode number (%d > %d); "
                "continuing from %d",
                name,
                ordered[-1],
                n,
                last,
                last,
            )
            break
    return last


def episode_offset(season_dir: Path, fresh: bool = False) -> int:
    """
    Return the number to add to each new episode's 1-based batch position.

    A freshly created season starts at 0 without reading the directory.
    """
    if fresh:
        return 0
    offset = last_episode_number(list_season(season_dir))
    logger.debug("Continuing %s after episode %d", season_dir, offset)
    return offset
