"""Tests for executor module."""

import shutil
from pathlib import Path

import pytest

from epify.errors import MediaPathError, RenameError
from epify.executor import execute_plan, move_episode
from epify.models import MediaItem, RenameJob, RenamePlan, Season


def make_plan(tmp_path: Path, count: int, create: bool = True) -> RenamePlan:
    """Helper to create a plan moving `count` downloads into Season 01."""
    downloads = tmp_path / "downloads"
    downloads.mkdir()
    show_dir = tmp_path / "Show (2020) [tvdbid-1]"
    show_dir.mkdir()
    season = Season(number=1, show_dir=show_dir, show_name="Show")
    if not create:
        season.path.mkdir()

    jobs = []
    for n in range(1, count + 1):
        source = downloads / f"ep{n}.mkv"
        source.write_text(f"episode {n}")
        jobs.append(
            RenameJob(
                source=MediaItem(source),
                target=season.path / season.episode_name(n, ".mkv"),
                episode=n,
            )
        )
    return RenamePlan(
        season=season, season_dir=season.path, jobs=jobs, create_season_dir=create
    )


class TestMoveEpisode:
    """Tests for move_episode function."""

    def test_moves_file(self, tmp_path):
        plan = make_plan(tmp_path, 1, create=False)
        job = plan.jobs[0]
        move_episode(job)
        assert not job.source.path.exists()
        assert job.target.read_text() == "episode 1"

    def test_refuses_to_overwrite(self, tmp_path):
        plan = make_plan(tmp_path, 1, create=False)
        job = plan.jobs[0]
        job.target.write_text("existing")
        with pytest.raises(FileExistsError):
            move_episode(job)
        assert job.target.read_text() == "existing"
        assert job.source.path.exists()


class TestExecutePlan:
    """Tests for execute_plan function."""

    def test_creates_season_and_moves_all(self, tmp_path):
        plan = make_plan(tmp_path, 12)
        moved = execute_plan(plan, show_progress=False)

        assert moved == 12
        names = sorted(p.name for p in plan.season_dir.iterdir())
        assert names == [f"Show S01E{n:02d}.mkv" for n in range(1, 13)]
        for job in plan.jobs:
            assert job.target.read_text() == f"episode {job.episode}"

    def test_existing_season_directory(self, tmp_path):
        plan = make_plan(tmp_path, 2, create=False)
        assert execute_plan(plan, show_progress=False) == 2

    def test_season_directory_creation_failure(self, tmp_path):
        """No episode is moved when the season directory cannot be created."""
        plan = make_plan(tmp_path, 2)
        plan.season_dir.mkdir()
        with pytest.raises(MediaPathError):
            execute_plan(plan, show_progress=False)
        assert all(job.source.path.exists() for job in plan.jobs)

    def test_failure_does_not_stop_other_moves(self, tmp_path, monkeypatch):
        plan = make_plan(tmp_path, 5)
        real_move = shutil.move

        def flaky_move(src, dst):
            if Path(src).name in ("ep2.mkv", "ep4.mkv"):
                raise PermissionError(13, "Permission denied", str(src))
            return real_move(src, dst)

        monkeypatch.setattr("epify.executor.shutil.move", flaky_move)

        with pytest.raises(RenameError) as exc:
            execute_plan(plan, show_progress=False)

        err = exc.value
        assert err.moved == 3
        assert [job.episode for job, _ in err.failures] == [2, 4]
        assert all(isinstance(e, PermissionError) for _, e in err.failures)
        assert "ep2.mkv" in str(err)
        assert "and 1 more" in str(err)

        # Successful moves are kept, failed sources stay where they were
        for job in plan.jobs:
            if job.episode in (2, 4):
                assert job.source.path.exists()
                assert not job.target.exists()
            else:
                assert job.target.exists()

    def test_existing_target_is_a_failure(self, tmp_path):
        plan = make_plan(tmp_path, 2, create=False)
        plan.jobs[1].target.write_text("existing")
        with pytest.raises(RenameError) as exc:
            execute_plan(plan, show_progress=False)
        assert exc.value.moved == 1
        assert isinstance(exc.value.failures[0][1], FileExistsError)

    def test_empty_plan(self, tmp_path):
        plan = make_plan(tmp_path, 0)
        assert execute_plan(plan, show_progress=False) == 0
        assert plan.season_dir.is_dir()
