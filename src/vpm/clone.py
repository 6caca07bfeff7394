#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Git repository cloning with structured progress events."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
import re

from git import RemoteProgress, Repo
from git.exc import GitError
from provide.foundation import logger

from vpm.exceptions import CloneError

STAGE_NAMES = {
    RemoteProgress.COUNTING: "counting",
    RemoteProgress.COMPRESSING: "compressing",
    RemoteProgress.WRITING: "writing",
    RemoteProgress.RECEIVING: "receiving",
    RemoteProgress.RESOLVING: "resolving",
    RemoteProgress.FINDING_SOURCES: "finding_sources",
    RemoteProgress.CHECKING_OUT: "checking_out",
}

# git reports transfer size as e.g. "1.20 MiB | 2.00 MiB/s"
_TRANSFERRED = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(bytes|KiB|MiB|GiB)\b")
_UNIT_BYTES = {"bytes": 1, "KiB": 1024, "MiB": 1024**2, "GiB": 1024**3}


@dataclass(frozen=True)
class CloneProgress:
    """Progress of a clone, as reported by git."""

    stage: str
    repository: str
    current: int = 0
    total: int | None = None
    message: str = ""
    bytes_received: int | None = None


ProgressSink = Callable[[CloneProgress], None]


def parse_transferred(message: str) -> int | None:
    """Return the byte count at the start of a git progress message, if any."""
    match = _TRANSFERRED.match(message or "")
    if match is None:
        return None
    return int(float(match.group(1)) * _UNIT_BYTES[match.group(2)])


class _ProgressRelay(RemoteProgress):
    """Translates GitPython progress callbacks into CloneProgress events."""

    def __init__(self, repository: str, sink: ProgressSink | None) -> None:
        super().__init__()
        self.repository = repository
        self.sink = sink

    def update(
        self,
        op_code: int,
        cur_count: str | float,
        max_count: str | float | None = None,
        message: str = "",
    ) -> None:
        stage = STAGE_NAMES.get(op_code & self.OP_MASK, "unknown")
        current = int(float(cur_count or 0))
        total = int(float(max_count)) if max_count else None

        if op_code & self.END:
            logger.trace("Clone stage finished", stage=stage, repository=self.repository)

        if self.sink is not None:
            self.sink(
                CloneProgress(
                    stage=stage,
                    repository=self.repository,
                    current=current,
                    total=total,
                    message=message or "",
                    bytes_received=parse_transferred(message),
                )
            )


def clone_repository(
    source: str,
    destination: str | Path,
    submodules: bool = False,
    branch: str | None = None,
    progress: ProgressSink | None = None,
) -> Path:
    """
    Clone a git repository.

    Args:
        source: Repository URL or local path
        destination: Directory to clone into
        submodules: Also clone submodules recursively
        branch: Branch to check out; the remote default when empty
        progress: Receives CloneProgress events (started, git stages, completed)

    Returns:
        Path to the cloned working tree

    Raises:
        CloneError: If git fails to fetch or check out the repository
    """
    target = Path(destination)

    def emit(stage: str) -> None:
        if progress is not None:
            progress(CloneProgress(stage=stage, repository=source))

    options: dict[str, str] = {}
    if branch:
        options["branch"] = branch
    multi_options = ["--recurse-submodules"] if submodules else None

    logger.info(
        "Cloning repository",
        source=source,
        destination=str(target),
        submodules=submodules,
        branch=branch or None,
    )
    emit("started")

    try:
        repo = Repo.clone_from(
            source,
            str(target),
            progress=_ProgressRelay(source, progress),
            multi_options=multi_options,
            **options,
        )
    except GitError as e:
        logger.error("Clone failed", source=source, destination=str(target), error=str(e))
        raise CloneError(
            f"Failed to clone {source}: {e}",
            cause=e,
            source=source,
            destination=str(target),
        ) from e

    emit("completed")
    working_tree = Path(repo.working_tree_dir or target)
    logger.info("Clone completed", source=source, destination=str(working_tree))
    return working_tree


# 🌶️📦🔚
