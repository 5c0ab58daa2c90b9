"""Pytest fixtures shared by unit and integration tests.

Source files, catalogs and libraries are all built under tmp_path so tests
never touch a real player installation.
"""
import json
import sqlite3
from pathlib import Path
from typing import Any, Dict, Iterable, Sequence, Tuple

import pytest

from mocks.mock_catalog import MockCatalog
from mocks.records import MARKER


@pytest.fixture
def write_source(tmp_path: Path):
    """Factory writing a two-line source file (marker + JSON array)."""
    def _write(name: str, records: Sequence[Any], marker: str = MARKER) -> Path:
        path = tmp_path / name
        path.write_text(f"{marker}\n{json.dumps(list(records))}\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture
def make_catalog(tmp_path: Path):
    """Factory creating an on-disk catalog with a file_t table."""
    def _make(rows: Iterable[Tuple[int, Any, Any, Any]], name: str = "modb") -> Path:
        path = tmp_path / name
        conn = sqlite3.connect(path)
        try:
            conn.execute("CREATE TABLE file_t (ft_id INTEGER, ft_title TEXT, ft_artist TEXT, ft_path TEXT)")
            conn.executemany("INSERT INTO file_t(ft_id, ft_title, ft_artist, ft_path) VALUES (?,?,?,?)", list(rows))
            conn.commit()
        finally:
            conn.close()
        return path
    return _make


@pytest.fixture
def library(tmp_path: Path):
    """A local library root named 'MyLib' plus a helper to add files to it."""
    root = tmp_path / "home" / "MyLib"
    root.mkdir(parents=True)

    def _add(*relative: str) -> Path:
        path = root.joinpath(*relative)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"ID3")
        return path

    _add.root = root  # type: ignore[attr-defined]
    return _add


@pytest.fixture
def mock_catalog():
    return MockCatalog()


@pytest.fixture
def test_config(tmp_path: Path) -> Dict[str, Any]:
    """Provide a minimal test configuration as a dict.

    Tests pass this to services/CLI directly (CliRunner obj=...) instead of
    writing .env files.
    """
    return {
        'log_level': 'DEBUG',
        'audials': {
            'path': None,
            'sync_dir': 'LocalAppDataFolder/RapidSolution/Audials_2015/AudialsSync',
            'playlists_pattern': '*_playlists.txt',
            'entries_pattern': '*_playlistentries.txt',
            'catalog_path': 'LocalAppDataFolder/RapidSolution/Audials_2015/MusicOrganizer/modb',
        },
        'sources': {
            'playlists_file': None,
            'entries_file': None,
            'catalog_file': None,
        },
        'library': {'path': None},
        'export': {
            'directory': str(tmp_path / 'export'),
            'overwrite': False,
            'preview_limit': 50,
        },
    }
