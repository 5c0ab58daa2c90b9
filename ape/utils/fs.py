from __future__ import annotations
from pathlib import Path
from typing import Iterator, Union
import fnmatch


def iter_matching_files(directory: Union[Path, str], pattern: str) -> Iterator[Path]:
    """Yield regular files directly inside ``directory`` whose name matches ``pattern``.

    Entries are visited in name order so discovery is stable across platforms.
    Unreadable directories yield nothing.
    """
    root = Path(directory)
    if not root.is_dir():
        return
    try:
        entries = sorted(root.iterdir(), key=lambda p: p.name)
    except OSError:
        return
    for p in entries:
        try:
            if fnmatch.fnmatchcase(p.name, pattern) and p.is_file():
                yield p
        except PermissionError:
            continue


def first_matching_file(directory: Union[Path, str], pattern: str) -> Path | None:
    return next(iter_matching_files(directory, pattern), None)


__all__ = ["iter_matching_files", "first_matching_file"]
