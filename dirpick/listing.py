"""Directory listing used by every frame and key press.

Listings are recomputed on demand and never cached. Children come back in
``os.scandir`` enumeration order with no sorting or hidden-file filtering.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .errors import wrap_error
from .log import get_logger

FALLBACK_DIRECTORY = Path(".")

logger = get_logger(__name__)


@dataclass(frozen=True)
class DirectoryEntry:
    """One direct child of a listed directory."""

    name: str
    is_dir: bool


def _scan(directory: Path) -> list[DirectoryEntry]:
    entries: list[DirectoryEntry] = []
    with os.scandir(directory) as children:
        for child in children:
            try:
                is_dir = child.is_dir(follow_symlinks=False)
            except OSError:
                continue
            entries.append(DirectoryEntry(name=child.name, is_dir=is_dir))
    return entries


def list_directory(directory: Path) -> list[DirectoryEntry]:
    """List direct children of ``directory``.

    When ``directory`` cannot be opened the working directory is listed
    instead. Failure to list the working directory raises ``DirpickError``.
    """
    try:
        return _scan(directory)
    except OSError as exc:
        logger.debug("cannot list %s (%s); listing %s instead", directory, exc, FALLBACK_DIRECTORY)
    try:
        return _scan(FALLBACK_DIRECTORY)
    except OSError as exc:
        raise wrap_error(
            exc,
            code="listing_failed",
            message="Cannot list the working directory",
        ) from exc
