"""Utilities for mapping catalog-recorded paths onto the local library.

The catalog is written on whichever machine ran the player, so its paths carry
that machine's separators and drive layout (e.g. ``C:\\Music\\MyLib\\...``).
Locally only the library root is known; its folder name is expected to appear
somewhere among the stored path's ancestor directories.
"""

from __future__ import annotations
from pathlib import Path
import logging
import os

logger = logging.getLogger(__name__)


def normalize_separators(stored_path: str, sep: str = os.sep) -> str:
    """Replace every backslash in a stored path with the platform separator."""
    return stored_path.replace("\\", sep)


def reconcile_stored_path(stored_path: str, library_root: str | Path) -> str | None:
    r"""Find the local file a catalog path refers to.

    Ancestor directories of the stored path are scanned nearest-first, skipping
    the file's own directory. Each one named like the library root yields a
    candidate: the library root plus every stored component after the match.
    The first candidate that is an existing file wins.

    Args:
        stored_path: Absolute path as recorded in the catalog
        library_root: Local library directory

    Returns:
        Existing local path as a string, or None if no candidate exists

    Example:
        Catalog has: C:\Music\MyLib\Artist\Song.mp3
        Library is: /home/user/MyLib
        Result: /home/user/MyLib/Artist/Song.mp3 (if that file exists)
    """
    if not stored_path:
        return None
    library_root = Path(library_root)
    root_name = library_root.name
    if not root_name:
        return None

    parts = Path(normalize_separators(stored_path)).parts
    # parts[:-1] is the parent chain; its last element is the file's own directory
    parent_count = len(parts) - 1
    if parent_count < 1:
        return None

    for i in range(parent_count - 2, -1, -1):
        if parts[i] != root_name:
            continue
        tail = parts[i + 1:]
        candidate = library_root.joinpath(*tail)
        logger.debug(f"Candidate for {stored_path}: {candidate}")
        if candidate.is_file():
            return str(candidate)
    return None


__all__ = ["normalize_separators", "reconcile_stored_path"]
