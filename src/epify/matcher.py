"""Episode ordering by numbers found in filenames."""

import logging
import re

from .errors import InvalidMatchIndex, NoEpisodesFound, NoNumericToken
from .models import MediaItem

logger = logging.getLogger(__name__)


def extract_numeric_tokens(name: str) -> list[int]:
    """
    Extract every run of digits in a filename, left to right.

    "Bleach 1S30E04.mkv" -> [1, 30, 4]

    Raises:
        NoNumericToken: If the name contains no digits
    """
    digits = re.compile(r"[0-9]+")
    tokens = [int(m.group()) for m in digits.finditer(name)]
    if not tokens:
        raise NoNumericToken(name)
    return tokens


def episode_key(item: MediaItem, match_index: int) -> int:
    """
    Return the number at `match_index` among the digit runs of the item's name.

    Raises:
        NoNumericToken: If the name contains no digits
        InvalidMatchIndex: If the name has fewer than match_index + 1 numbers
    """
    tokens = extract_numeric_tokens(item.name)
    if match_index < 0 or match_index >= len(tokens):
        raise InvalidMatchIndex(match_index, item.name)
    return tokens[match_index]


def sort_episodes(items: list[MediaItem], match_index: int = 0) -> list[MediaItem]:
    """
    Order a batch of episodes by the number at `match_index` in each filename.

    Every item is checked before anything is ordered, so one malformed name
    rejects the whole batch. Items with equal numbers keep their input order.

    Returns:
        A new list; `items` is left untouched.
    """
    if not items:
        raise NoEpisodesFound()
    if match_index < 0:
        raise InvalidMatchIndex(match_index)

    keys = [episode_key(item, match_index) for item in items]

    order = sorted(range(len(items)), key=lambda i: keys[i])
    ordered = [items[i] for i in order]
    logger.debug(
        "Episode order (match index %d): %s",
        match_index,
        ", ".join(item.name for item in ordered),
    )
    return ordered
