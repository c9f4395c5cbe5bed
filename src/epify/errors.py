"""Errors raised by epify operations."""

from pathlib import Path


class EpifyError(Exception):
    """Base class for all epify errors."""

    pass


class InvalidShow(EpifyError):
    """Show metadata (name, year or TVDB id) is invalid."""

    pass


class InvalidMovie(EpifyError):
    """Movie metadata (name, year or TMDB id) is invalid."""

    pass


class InvalidSeasonNumber(EpifyError):
    """Season number is not a non-negative integer."""

    pass


class InvalidShowDirectory(EpifyError):
    """Show directory name lacks the "<name> (<year>)" form."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"invalid show directory {str(path)!r}")


class InvalidSeasonDirectory(EpifyError):
    """Season directory name is not "Season <number>"."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"invalid season directory {str(path)!r}")


class NoNumericToken(EpifyError):
    """Filename contains no digits to order by."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"episode {name!r} must contain a number")


class InvalidMatchIndex(EpifyError):
    """Match index does not select a number in some filename."""

    def __init__(self, index: int, name: str | None = None):
        self.index = index
        self.name = name
        if name is None:
            super().__init__(f"invalid match index {index}")
        else:
            super().__init__(f"invalid match index {index} for episode {name!r}")


class InvalidEpisode(EpifyError):
    """Existing episode filename lacks the "E<number>." marker."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"invalid episode {name!r}")


class InvalidEpisodeNumber(EpifyError):
    """Existing episode filename carries a non-numeric episode number."""

    def __init__(self, name: str, number: str):
        self.name = name
        self.number = number
        super().__init__(f"invalid episode number {number!r} in {name!r}")


class NoEpisodesFound(EpifyError):
    """The input batch is empty."""

    def __init__(self):
        super().__init__("no episodes found")


class NoShowsFound(EpifyError):
    """No show directory matches a download."""

    pass


class NoSeasonsFound(EpifyError):
    """A show directory holds no season directory."""

    pass


class MediaPathError(EpifyError):
    """A path is missing, or is a file where a directory is expected (or vice versa)."""

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(message)


class RenameError(EpifyError):
    """
    One or more moves of a batch failed.

    Moves that succeeded are not rolled back; `moved` counts them and
    `failures` holds every (job, error) pair in episode order.
    """

    def __init__(self, failures: list, moved: int):
        self.failures = failures
        self.moved = moved
        job, error = failures[0]
        more = f" (and {len(failures) - 1} more)" if len(failures) > 1 else ""
        super().__init__(
            f"moving {str(job.source.path)!r} to {str(job.target)!r} failed: "
            f"{error}{more}"
        )
