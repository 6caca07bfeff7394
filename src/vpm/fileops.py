#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Filesystem helpers used while installing packs."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Literal

from provide.foundation import logger
from provide.foundation.file import safe_copy
from provide.foundation.file.directory import ensure_dir, safe_rmtree


@dataclass(frozen=True)
class CopyProgress:
    """A single item about to be copied by copy_directory."""

    kind: Literal["file", "directory"]
    source: Path
    destination: Path


ProgressSink = Callable[[CopyProgress], None]


def _matches_any(name: str, patterns: Iterable[str]) -> bool:
    return any(fnmatchcase(name, pattern) for pattern in patterns)


def _filter_entries(
    entries: list[Path],
    ignore: Sequence[str] | None,
    match: Sequence[str] | None,
) -> list[Path]:
    """Apply match (keep if any matches) then ignore (drop if any matches) by entry name."""
    if match is not None:
        entries = [e for e in entries if _matches_any(e.name, match)]
    if ignore is not None:
        entries = [e for e in entries if not _matches_any(e.name, ignore)]
    return entries


def copy_directory(
    src: str | Path,
    dst: str | Path,
    ignore: Sequence[str] | None = None,
    match: Sequence[str] | None = None,
    progress: ProgressSink | None = None,
) -> None:
    """
    Recursively copy a directory tree with glob filtering.

    Filters apply by name to the files and subdirectories of every visited
    directory. Files are copied before subdirectories are descended into.

    Args:
        src: Source directory
        dst: Destination directory, created if missing
        ignore: Glob patterns; entries matching any are skipped
        match: Glob patterns; only entries matching at least one are kept
        progress: Called with a CopyProgress before each item is copied

    Raises:
        FileNotFoundError: If src does not exist or is not a directory
        ValueError: If dst is src or lies inside it
    """
    source = Path(src)
    destination = Path(dst)

    if not source.is_dir():
        raise FileNotFoundError(f"Source directory does not exist or could not be found: {source}")
    if destination.resolve().is_relative_to(source.resolve()):
        raise ValueError(f"Cannot copy '{source}' into itself: '{destination}'")

    _copy_tree(source, destination, ignore, match, progress)


def _copy_tree(
    source: Path,
    destination: Path,
    ignore: Sequence[str] | None,
    match: Sequence[str] | None,
    progress: ProgressSink | None,
) -> None:
    children = sorted(source.iterdir())
    dirs = _filter_entries([c for c in children if c.is_dir()], ignore, match)
    files = _filter_entries([c for c in children if c.is_file()], ignore, match)

    ensure_dir(destination)

    for file in files:
        target = destination / file.name
        if progress is not None:
            progress(CopyProgress(kind="file", source=file, destination=target))
        safe_copy(file, target, overwrite=True)

    for subdir in dirs:
        target = destination / subdir.name
        if progress is not None:
            progress(CopyProgress(kind="directory", source=subdir, destination=target))
        _copy_tree(subdir, target, ignore, match, progress)

    logger.trace(
        "Copied directory",
        src=str(source),
        dst=str(destination),
        files=len(files),
        dirs=len(dirs),
    )


def cleanup(temp_dir: str | Path) -> bool:
    """Remove the installer's temporary directory.

    Returns:
        True if something was removed, False if it did not exist
    """
    path = Path(temp_dir)
    removed = safe_rmtree(path, missing_ok=True)
    if removed:
        logger.info("Removed temporary directory", path=str(path))
    return removed


# 🌶️📦🔚
