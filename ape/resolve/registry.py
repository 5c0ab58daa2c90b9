"""Playlist registry built from the decoded playlist array.

Every element is decoded independently; malformed elements become one
diagnostic each and never abort the build.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Sequence
import logging

from ..errors import RecordError
from ..sources.decoder import STRING, decode_nested_fields, json_kind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlaylistEntry:
    """A playlist the user may select."""
    id: str
    name: str


@dataclass
class RegistryResult:
    entries: List[PlaylistEntry] = field(default_factory=list)
    diagnostics: List[str] = field(default_factory=list)


def build_registry(playlist_array: Sequence[Any]) -> RegistryResult:
    """Decode playlist records into PlaylistEntry objects, in input order."""
    result = RegistryResult()
    for index, element in enumerate(playlist_array):
        if not isinstance(element, dict):
            result.diagnostics.append(
                f"Playlist #{index}: unexpected JSON in playlist array, expected an object, found {json_kind(element)}"
            )
            continue
        try:
            nested = decode_nested_fields(element, {"Name": STRING}, require_id=True)
        except RecordError as e:
            result.diagnostics.append(f"Playlist #{index}: {e}")
            continue
        result.entries.append(PlaylistEntry(id=nested.record_id, name=nested["Name"]))
    logger.debug(f"Registry: {len(result.entries)} playlist(s), {len(result.diagnostics)} diagnostic(s)")
    return result


class PlaylistRegistry:
    """Immutable set of selectable playlists.

    Entries keep source order, duplicates included. For selection a later
    entry with the same id (or name) replaces the earlier one.
    """

    def __init__(self, entries: Iterable[PlaylistEntry], diagnostics: Iterable[str] = ()):
        self.entries: tuple[PlaylistEntry, ...] = tuple(entries)
        self.diagnostics: tuple[str, ...] = tuple(diagnostics)
        self._by_id: Dict[str, PlaylistEntry] = {}
        self._by_name: Dict[str, PlaylistEntry] = {}
        for entry in self.entries:
            if entry.id in self._by_id:
                logger.warning(
                    f"Duplicate playlist id {entry.id!r}: '{entry.name}' replaces '{self._by_id[entry.id].name}' for selection"
                )
            self._by_id[entry.id] = entry
            self._by_name[entry.name] = entry

    @classmethod
    def from_array(cls, playlist_array: Sequence[Any]) -> "PlaylistRegistry":
        built = build_registry(playlist_array)
        return cls(built.entries, built.diagnostics)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def get_by_id(self, playlist_id: str) -> PlaylistEntry | None:
        return self._by_id.get(playlist_id)

    def get_by_name(self, name: str) -> PlaylistEntry | None:
        return self._by_name.get(name)

    def select(self, key: str, by_id: bool = False) -> PlaylistEntry | None:
        """Find a playlist by name (default) or by id; names fall back to ids."""
        if by_id:
            return self.get_by_id(key)
        return self.get_by_name(key) or self.get_by_id(key)

    def names(self) -> List[str]:
        """Selectable names in first-seen order, without repeats."""
        return list(dict.fromkeys(entry.name for entry in self.entries))


__all__ = ["PlaylistEntry", "PlaylistRegistry", "RegistryResult", "build_registry"]
