"""Tests for directory name and input path validation."""

from pathlib import Path

import pytest

from epify.errors import (
    InvalidSeasonDirectory,
    InvalidShowDirectory,
    MediaPathError,
    NoEpisodesFound,
)
from epify.validation import (
    parse_season_dir,
    parse_show_dir,
    require_directory,
    require_file,
    validate_episode_files,
)


class TestParseShowDir:
    """Tests for parse_show_dir function."""

    @pytest.mark.parametrize(
        "name, show",
        [
            ("The Office (2005) [tvdbid-73244]", "The Office"),
            ("Steins;Gate (2011) [tvdbid-244061]", "Steins;Gate"),
            ("Mr. Robot (2015)", "Mr. Robot"),
            ("A (B) (2001) [tvdbid-1]", "A"),
        ],
    )
    def test_valid(self, name, show):
        assert parse_show_dir(Path("/media/shows") / name) == show

    @pytest.mark.parametrize(
        "name",
        [
            "(2005) [tvdbid-73244]",
            "The Office [tvdbid-73244]",
            "The Office(2005) [tvdbid-73244]",
            " (2005) [tvdbid-73244]",
        ],
    )
    def test_invalid(self, name):
        with pytest.raises(InvalidShowDirectory):
            parse_show_dir(Path("/media/shows") / name)


class TestParseSeasonDir:
    """Tests for parse_season_dir function."""

    @pytest.mark.parametrize(
        "name, number",
        [
            ("Season 03", 3),
            ("Season 3", 3),
            ("Season 00", 0),
            ("Season 300", 300),
        ],
    )
    def test_valid(self, name, number):
        assert parse_season_dir(Path("/media") / name) == number

    @pytest.mark.parametrize(
        "name",
        ["noprefix", "Season three", "Season ", "season 03", "Season -1", "Season 1a"],
    )
    def test_invalid(self, name):
        with pytest.raises(InvalidSeasonDirectory):
            parse_season_dir(Path("/media") / name)


class TestRequirePaths:
    """Tests for require_directory and require_file."""

    def test_directory(self, tmp_path):
        assert require_directory(tmp_path) == tmp_path

    def test_missing_directory(self, tmp_path):
        with pytest.raises(MediaPathError) as exc:
            require_directory(tmp_path / "nonexistentdir")
        assert exc.value.path == tmp_path / "nonexistentdir"

    def test_file_is_not_directory(self, tmp_path):
        f = tmp_path / "show.mkv"
        f.touch()
        with pytest.raises(MediaPathError, match="not a directory"):
            require_directory(f)

    def test_file(self, tmp_path):
        f = tmp_path / "ep1.mkv"
        f.touch()
        assert require_file(f) == f

    def test_directory_is_not_file(self, tmp_path):
        with pytest.raises(MediaPathError, match="is a directory"):
            require_file(tmp_path)


class TestValidateEpisodeFiles:
    """Tests for validate_episode_files function."""

    def test_no_episodes(self):
        with pytest.raises(NoEpisodesFound):
            validate_episode_files([])

    def test_items_keep_extension(self, tmp_path):
        f = tmp_path / "ep1.mkv"
        f.touch()
        (item,) = validate_episode_files([f])
        assert item.path == f
        assert item.extension == ".mkv"

    def test_missing_episode(self, tmp_path):
        f = tmp_path / "ep1.mkv"
        f.touch()
        with pytest.raises(MediaPathError):
            validate_episode_files([f, tmp_path / "nonexistent.mkv"])

    def test_episode_directory(self, tmp_path):
        (tmp_path / "epdir").mkdir()
        with pytest.raises(MediaPathError):
            validate_episode_files([tmp_path / "epdir"])
