from __future__ import annotations
"""Catalog interface abstraction for testability.

The lookup engine depends on this contract only. A concrete read-only SQLite
implementation (`Catalog`) and an in-memory mock used in unit tests both
implement it.
"""
from abc import ABC, abstractmethod
from typing import Any, List, Sequence

LOOKUP_SQL = "SELECT ft_title, ft_artist, ft_path FROM file_t WHERE ft_id = ?"


class CatalogInterface(ABC):
    @abstractmethod
    def prepare_lookup(self) -> None:
        """Check that the lookup query can be built against this catalog.

        Raises:
            CatalogSchemaError: table or columns missing
        """

    @abstractmethod
    def rows_for_id(self, audio_id: int) -> List[Sequence[Any]]:
        """Return raw ``(title, artist, path)`` rows for one id, in catalog order.

        Raises:
            sqlite3.Error: the query for this id failed
        """

    @abstractmethod
    def close(self) -> None: ...

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


__all__ = ["CatalogInterface", "LOOKUP_SQL"]
