from __future__ import annotations
import sqlite3
import logging
from pathlib import Path
from typing import Any, List, Sequence

from .interface import CatalogInterface, LOOKUP_SQL
from ..errors import CatalogOpenError, CatalogSchemaError

logger = logging.getLogger(__name__)


def _read_only_uri(path: Path) -> str:
    return f"{path.resolve().as_uri()}?mode=ro"


class Catalog(CatalogInterface):
    """Read-only handle on the music organizer's SQLite catalog."""

    def __init__(self, path: Path, conn: sqlite3.Connection):
        self.path = path
        self.conn = conn
        self._closed = False

    @classmethod
    def open(cls, path: Path | str) -> "Catalog":
        """Open the catalog read-only and check that it is an SQLite database.

        Raises:
            CatalogOpenError: file missing/unreadable or not a database
        """
        path = Path(path)
        if not path.is_file():
            raise CatalogOpenError(path)
        try:
            conn = sqlite3.connect(_read_only_uri(path), uri=True, timeout=30)
        except sqlite3.Error as e:
            raise CatalogOpenError(path, str(e)) from e
        try:
            conn.execute("PRAGMA schema_version").fetchone()
        except sqlite3.DatabaseError as e:
            conn.close()
            raise CatalogOpenError(path, "not recognised as an SQLite database", short="Not a database") from e
        logger.debug(f"Opened catalog {path} (read-only)")
        return cls(path, conn)

    def prepare_lookup(self) -> None:
        try:
            # EXPLAIN compiles the statement without running it
            self.conn.execute(f"EXPLAIN {LOOKUP_SQL}", (0,)).fetchall()
        except sqlite3.Error as e:
            logger.warning(f"Catalog {self.path} has an unexpected schema: {e}")
            raise CatalogSchemaError(self.path, str(e)) from e

    def rows_for_id(self, audio_id: int) -> List[Sequence[Any]]:
        cur = self.conn.execute(LOOKUP_SQL, (audio_id,))
        return cur.fetchall()

    def close(self) -> None:
        if not self._closed:
            self.conn.close()
            self._closed = True
            logger.debug(f"Closed catalog {self.path}")


def check_catalog(path: Path | str) -> Path:
    """Validate that ``path`` is an openable SQLite database; return it.

    Raises:
        CatalogOpenError: see Catalog.open
    """
    with Catalog.open(path):
        pass
    return Path(path)


__all__ = ["Catalog", "check_catalog"]
