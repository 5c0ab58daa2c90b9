from __future__ import annotations
"""In-memory mock implementation of CatalogInterface for unit tests."""
import sqlite3
from typing import Any, Dict, List, Sequence, Set, Tuple

from ape.catalog import CatalogInterface
from ape.errors import CatalogSchemaError


class MockCatalog(CatalogInterface):
    def __init__(self):
        self.rows: Dict[int, List[Tuple[Any, Any, Any]]] = {}
        self.failing_ids: Set[int] = set()
        self.schema_ok = True
        self.closed = False
        self.call_log: List[str] = []

    def add(self, audio_id: int, title: Any, artist: Any, stored_path: Any) -> None:
        self.rows.setdefault(audio_id, []).append((title, artist, stored_path))

    def prepare_lookup(self) -> None:
        self.call_log.append("prepare_lookup")
        if not self.schema_ok:
            raise CatalogSchemaError("<mock>", "no such table: file_t")

    def rows_for_id(self, audio_id: int) -> List[Sequence[Any]]:
        self.call_log.append(f"rows_for_id:{audio_id}")
        if audio_id in self.failing_ids:
            raise sqlite3.OperationalError("disk I/O error")
        return list(self.rows.get(audio_id, []))

    def close(self) -> None:
        self.closed = True
