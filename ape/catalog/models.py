"""Domain model types for catalog rows and resolved audio entries.

These dataclasses make the data contracts between the catalog, the
reconciler and the export step explicit.
"""
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogRow:
    """One ``file_t`` row as returned by the lookup query."""
    title: str
    artist: str
    stored_path: str

    @classmethod
    def from_row(cls, row) -> CatalogRow:
        """Convert a sqlite3.Row (or a 3-tuple) to CatalogRow.

        Raises:
            ValueError: a column is not text (e.g. NULL)
        """
        title, artist, stored_path = row[0], row[1], row[2]
        for name, value in (("ft_title", title), ("ft_artist", artist), ("ft_path", stored_path)):
            if not isinstance(value, str):
                raise ValueError(f"column {name} is {type(value).__name__}, expected text")
        return cls(title=title, artist=artist, stored_path=stored_path)


@dataclass(frozen=True)
class ResolvedAudioEntry:
    """A playlist member whose file was found in the local library."""
    title: str
    artist: str
    real_path: str


__all__ = ["CatalogRow", "ResolvedAudioEntry"]
