"""Data models for epify."""

from dataclasses import dataclass, field
from pathlib import Path

from .constants import (
    BARE_EPISODE_FORMAT,
    EPISODE_FORMAT,
    SEASON_DIR_FORMAT,
    SHOW_DIR_FORMAT,
)


@dataclass(frozen=True)
class MediaItem:
    """An input file discovered for one season population or addition."""

    path: Path

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def extension(self) -> str:
        """Original extension, including the leading dot ("" if none)."""
        return self.path.suffix


@dataclass(frozen=True)
class Show:
    """A TV show and the directory it lives in."""

    name: str
    year: int
    tvdb_id: int
    directory: Path

    @property
    def dir_name(self) -> str:
        return SHOW_DIR_FORMAT.format(name=self.name, year=self.year, id=self.tvdb_id)

    @property
    def path(self) -> Path:
        return self.directory / self.dir_name


@dataclass(frozen=True)
class Season:
    """A season of a show."""

    number: int
    show_dir: Path
    show_name: str

    @property
    def dir_name(self) -> str:
        return SEASON_DIR_FORMAT.format(number=self.number)

    @property
    def path(self) -> Path:
        return self.show_dir / self.dir_name

    def episode_name(
        self, episode: int, extension: str, include_show_name: bool = True
    ) -> str:
        """Filename of an episode of this season, e.g. "Show S01E02.mkv"."""
        if include_show_name:
            return EPISODE_FORMAT.format(
                show=self.show_name,
                season=self.number,
                episode=episode,
                ext=extension,
            )
        return BARE_EPISODE_FORMAT.format(
            season=self.number, episode=episode, ext=extension
        )


@dataclass(frozen=True)
class RenameJob:
    """One move of an input file to its episode filename."""

    source: MediaItem
    target: Path
    episode: int


@dataclass
class RenamePlan:
    """Complete plan for moving a batch of episodes into a season."""

    season: Season
    season_dir: Path
    jobs: list[RenameJob] = field(default_factory=list)
    create_season_dir: bool = False

    @property
    def episode_numbers(self) -> list[int]:
        return [job.episode for job in self.jobs]


@dataclass(frozen=True)
class TorrentFile:
    """A completed download and the media root it should be filed under."""

    directory: Path
    name: str
    destination: Path

    @property
    def path(self) -> Path:
        return self.directory / self.name
