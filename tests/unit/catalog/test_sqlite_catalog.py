"""Unit tests for the read-only SQLite catalog."""

from __future__ import annotations
import sqlite3
from pathlib import Path

import pytest

from ape.catalog import Catalog, check_catalog
from ape.catalog.models import CatalogRow
from ape.errors import CatalogOpenError, CatalogSchemaError


def test_rows_for_id_in_catalog_order(make_catalog):
    path = make_catalog([
        (1, "Song", "Artist", r"C:\a.mp3"),
        (2, "Other", "Artist", r"C:\b.mp3"),
        (1, "Song", "Artist", r"C:\c.mp3"),
    ])

    with Catalog.open(path) as catalog:
        catalog.prepare_lookup()
        rows = catalog.rows_for_id(1)

    assert [tuple(r) for r in rows] == [("Song", "Artist", r"C:\a.mp3"), ("Song", "Artist", r"C:\c.mp3")]


def test_unknown_id_returns_no_rows(make_catalog):
    with Catalog.open(make_catalog([])) as catalog:
        assert catalog.rows_for_id(123) == []


def test_opened_read_only(make_catalog):
    path = make_catalog([(1, "Song", "Artist", "p")])

    with Catalog.open(path) as catalog:
        with pytest.raises(sqlite3.OperationalError):
            catalog.conn.execute("DELETE FROM file_t")


def test_connection_closed_on_exit(make_catalog):
    path = make_catalog([])

    with Catalog.open(path) as catalog:
        pass

    with pytest.raises(sqlite3.ProgrammingError):
        catalog.conn.execute("SELECT 1")


def test_missing_file(tmp_path: Path):
    with pytest.raises(CatalogOpenError):
        Catalog.open(tmp_path / "modb")


def test_not_a_database(tmp_path: Path):
    path = tmp_path / "modb"
    path.write_bytes(b"this is definitely not an sqlite database file" * 10)

    with pytest.raises(CatalogOpenError) as exc:
        check_catalog(path)
    assert exc.value.short == "Not a database"


def test_schema_mismatch(tmp_path: Path):
    path = tmp_path / "modb"
    conn = sqlite3.connect(path)
    conn.execute("CREATE TABLE file_t (ft_id INTEGER, ft_name TEXT)")
    conn.commit()
    conn.close()

    with Catalog.open(path) as catalog:
        with pytest.raises(CatalogSchemaError):
            catalog.prepare_lookup()


def test_catalog_row_rejects_non_text():
    with pytest.raises(ValueError):
        CatalogRow.from_row((None, "Artist", "p"))
    assert CatalogRow.from_row(("T", "A", "p")) == CatalogRow("T", "A", "p")
