"""End-to-end tests: source files + catalog + library -> resolved entries."""

from __future__ import annotations
from pathlib import Path

import pytest

from ape.catalog import ResolvedAudioEntry
from ape.errors import CatalogSchemaError, LibraryRootError
from ape.resolve.registry import PlaylistEntry
from ape.services.resolution_service import resolve_playlist, validate_library_root
from ape.services.source_service import evaluate_sources
from ape.sources.discovery import SourcePaths
from mocks.records import entry_record, playlist_record


@pytest.fixture
def road_trip(write_source, make_catalog, library):
    """Playlist 'Road Trip' (p1) with member 42; 99 belongs to another playlist."""
    def _build(catalog_rows):
        paths = SourcePaths(
            playlists=write_source("u_playlists.txt", [playlist_record("p1", "Road Trip"), playlist_record("p2", "Other")]),
            entries=write_source("u_playlistentries.txt", [entry_record("p1", 42), entry_record("p2", 99)]),
            catalog=make_catalog(catalog_rows),
        )
        return evaluate_sources(paths)
    return _build


def _run(sources, library_root):
    return resolve_playlist(
        playlist=sources.registry.select("Road Trip"),
        membership_array=sources.membership_array,
        catalog_path=sources.catalog_path,
        library_root=library_root,
    )


def test_single_member_resolves_without_diagnostics(road_trip, library):
    song = library("Artist", "Song.mp3")
    sources = road_trip([
        (42, "Song", "Artist", r"C:\Music\MyLib\Artist\Song.mp3"),
        (99, "Other", "Artist", r"C:\Music\MyLib\Artist\Other.mp3"),
    ])

    result = _run(sources, library.root)

    assert result.entries == [ResolvedAudioEntry("Song", "Artist", str(song))]
    assert result.diagnostics == []
    assert result.member_count == 1
    assert result.unresolved_count == 0


def test_missing_catalog_row(road_trip, library):
    library("Artist", "Song.mp3")
    sources = road_trip([(99, "Other", "Artist", r"C:\Music\MyLib\Artist\Other.mp3")])

    result = _run(sources, library.root)

    assert result.entries == []
    assert len(result.diagnostics) == 1
    assert "42" in result.diagnostics[0]
    assert result.unresolved_count == 1


def test_rerun_is_identical(road_trip, library):
    library("Artist", "Song.mp3")
    sources = road_trip([
        (42, "Song", "Artist", r"C:\Music\MyLib\Artist\Song.mp3"),
        (42, "Song", "Artist", r"C:\Music\MyLib\Artist\Song (2).mp3"),
    ])

    first = _run(sources, library.root)
    second = _run(sources, library.root)

    assert first.entries == second.entries
    assert first.diagnostics == second.diagnostics
    assert len(first.diagnostics) == 1


def test_membership_and_lookup_diagnostics_in_order(write_source, make_catalog, library):
    sources = evaluate_sources(SourcePaths(
        playlists=write_source("p.txt", [playlist_record("p1", "Road Trip")]),
        entries=write_source("e.txt", ["junk", entry_record("p1", 7)]),
        catalog=make_catalog([]),
    ))

    result = _run(sources, library.root)

    assert len(result.diagnostics) == 2
    assert "expected an object" in result.diagnostics[0]
    assert "audio_id=7" in result.diagnostics[1]


def test_schema_mismatch_is_fatal(tmp_path: Path, write_source, library):
    import sqlite3
    catalog = tmp_path / "modb"
    conn = sqlite3.connect(catalog)
    conn.execute("CREATE TABLE something_else (x INTEGER)")
    conn.commit()
    conn.close()

    with pytest.raises(CatalogSchemaError):
        resolve_playlist(
            playlist=PlaylistEntry("p1", "Road Trip"),
            membership_array=[entry_record("p1", 1)],
            catalog_path=catalog,
            library_root=library.root,
        )


class TestValidateLibraryRoot:
    def test_existing_directory(self, library):
        assert validate_library_root(str(library.root)) == library.root

    @pytest.mark.parametrize("value", [None, ""])
    def test_not_configured(self, value):
        with pytest.raises(LibraryRootError):
            validate_library_root(value)

    def test_missing_directory(self, tmp_path: Path):
        with pytest.raises(LibraryRootError):
            validate_library_root(tmp_path / "nope")

    def test_file_is_rejected(self, tmp_path: Path):
        f = tmp_path / "file"
        f.write_text("x")
        with pytest.raises(LibraryRootError):
            validate_library_root(f)


class TestRelativeLibraryRoot:
    def test_dot_resolves_to_current_directory(self, road_trip, library, monkeypatch):
        song = library("Artist", "Song.mp3")
        sources = road_trip([(42, "Song", "Artist", r"C:\Music\MyLib\Artist\Song.mp3")])
        monkeypatch.chdir(library.root)

        result = _run(sources, ".")

        assert result.entries == [ResolvedAudioEntry("Song", "Artist", str(song))]
        assert result.diagnostics == []

    def test_relative_name_yields_absolute_paths(self, road_trip, library, monkeypatch):
        library("Artist", "Song.mp3")
        sources = road_trip([(42, "Song", "Artist", r"C:\Music\MyLib\Artist\Song.mp3")])
        monkeypatch.chdir(library.root.parent)

        result = _run(sources, "MyLib")

        assert len(result.entries) == 1
        assert Path(result.entries[0].real_path).is_absolute()
        assert result.entries[0].real_path == str(library.root / "Artist" / "Song.mp3")

    def test_validate_returns_absolute_root(self, library, monkeypatch):
        monkeypatch.chdir(library.root)
        assert validate_library_root(".") == library.root
