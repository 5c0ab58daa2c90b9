"""Unit tests for extracting member ids of a playlist."""

from __future__ import annotations
import json

from ape.resolve.membership import resolve_membership
from mocks.records import entry_record


def test_ids_in_input_order_other_playlists_ignored():
    array = [
        entry_record("p1", 3),
        entry_record("p2", 99),
        entry_record("p1", 1),
        entry_record("p1", 2),
    ]

    result = resolve_membership("p1", array)

    assert result.audio_ids == [3, 1, 2]
    assert result.diagnostics == []


def test_repeated_ids_are_kept():
    array = [entry_record("p1", 7), entry_record("p1", 7)]

    assert resolve_membership("p1", array).audio_ids == [7, 7]


def test_playlist_id_match_is_exact():
    array = [entry_record("P1", 1), entry_record("p1 ", 2)]

    result = resolve_membership("p1", array)

    assert result.audio_ids == []
    assert result.diagnostics == []


def test_missing_payload_vs_payload_not_string():
    array = [
        {"id": "x"},
        {"payload": {"PlaylistId": "p1", "LocalId": 1}},
    ]

    result = resolve_membership("p1", array)

    assert result.audio_ids == []
    assert len(result.diagnostics) == 2
    assert "Could not find field payload" in result.diagnostics[0]
    assert "should be a string" in result.diagnostics[1]
    assert "object" in result.diagnostics[1]


def test_bad_records_diagnosed_and_skipped():
    array = [
        "text",
        {"payload": "{broken"},
        {"payload": json.dumps({"LocalId": 1})},
        {"payload": json.dumps({"PlaylistId": 5, "LocalId": 1})},
        {"payload": json.dumps({"PlaylistId": "p1", "LocalId": "1"})},
        entry_record("p1", 10),
    ]

    result = resolve_membership("p1", array)

    assert result.audio_ids == [10]
    assert len(result.diagnostics) == 5
    assert "string" in result.diagnostics[0]
    assert "{broken" in result.diagnostics[1]
    assert "PlaylistId" in result.diagnostics[2]
    assert "PlaylistId" in result.diagnostics[3] and "number" in result.diagnostics[3]
    assert "LocalId" in result.diagnostics[4] and "string" in result.diagnostics[4]


def test_malformed_entry_of_other_playlist_still_diagnosed():
    array = [{"payload": json.dumps({"PlaylistId": "p2", "LocalId": None})}]

    result = resolve_membership("p1", array)

    assert len(result.diagnostics) == 1


def test_idempotent():
    array = [entry_record("p1", 1), 5, entry_record("p1", 2)]

    first = resolve_membership("p1", array)
    second = resolve_membership("p1", array)

    assert first == second
