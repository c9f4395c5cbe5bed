"""Execute rename plans."""

import logging
import os
import shutil
from concurrent.futures import ThreadPoolExecutor, as_completed

from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn

from .constants import DIR_MODE, MAX_RENAME_WORKERS
from .errors import MediaPathError, RenameError
from .models import RenameJob, RenamePlan
from .utils import console

logger = logging.getLogger(__name__)


def move_episode(job: RenameJob):
    """
    Move one episode to its target name.

    Raises:
        FileExistsError: If the target already exists
        OSError: If the move fails
    """
    if os.path.lexists(job.target):
        raise FileExistsError(f"{str(job.target)!r} already exists")
    shutil.move(job.source.path, job.target)


def _process_job(job: RenameJob) -> tuple[RenameJob, OSError | None]:
    """
    Process a single rename job.

    Returns:
        Tuple of (job, error). error is None on success.
    """
    try:
        move_episode(job)
    except OSError as e:
        return job, e
    return job, None


def _create_season_dir(plan: RenamePlan):
    try:
        plan.season_dir.mkdir(mode=DIR_MODE)
    except OSError as e:
        raise MediaPathError(
            plan.season_dir,
            f"cannot create season directory {str(plan.season_dir)!r}: {e}",
        ) from e
    logger.info("Created %s", plan.season_dir)


def execute_plan(plan: RenamePlan, show_progress: bool = True) -> int:
    """
    Execute all moves in a rename plan in parallel.

    Every move is attempted even when others fail, and all of them finish
    before this returns. Moves that succeeded stay in place when others fail.

    Args:
        plan: The rename plan to execute
        show_progress: If True, display a progress bar on the console

    Returns:
        Number of episodes moved

    Raises:
        MediaPathError: If the season directory cannot be created
        RenameError: If any move failed
    """
    if plan.create_season_dir:
        _create_season_dir(plan)

    if not plan.jobs:
        return 0

    num_workers = min(len(plan.jobs), MAX_RENAME_WORKERS)
    moved = 0
    failures: list[tuple[RenameJob, OSError]] = []

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TextColumn("[progress.percentage]{task.completed}/{task.total}"),
        console=console,
        disable=not show_progress,
    ) as progress:
        task = progress.add_task("Moving", total=len(plan.jobs))

        with ThreadPoolExecutor(max_workers=num_workers) as executor:
            futures = [executor.submit(_process_job, job) for job in plan.jobs]

            for future in as_completed(futures):
                job, error = future.result()
                if error is None:
                    moved += 1
                    logger.debug("Moved %s -> %s", job.source.path, job.target)
                else:
                    failures.append((job, error))
                    logger.error(
                        "Episode %d failed: %s -> %s: %s",
                        job.episode,
                        job.source.path,
                        job.target,
                        error,
                    )
                progress.advance(task)

    if failures:
        failures.sort(key=lambda f: f[0].episode)
        raise RenameError(failures, moved)

    logger.info("Moved %d episode(s) into %s", moved, plan.season_dir)
    return moved
