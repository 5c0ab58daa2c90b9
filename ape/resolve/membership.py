"""Extraction of a playlist's member audio ids from the membership array."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, List, Sequence
import logging

from ..errors import RecordError
from ..sources.decoder import STRING, UINT32, decode_nested_fields, json_kind

logger = logging.getLogger(__name__)


@dataclass
class MembershipResult:
    audio_ids: List[int] = field(default_factory=list)
    diagnostics: List[str] = field(default_factory=list)


def resolve_membership(playlist_id: str, membership_array: Sequence[Any]) -> MembershipResult:
    """Collect LocalId values of entries belonging to ``playlist_id``.

    Ids keep input order and are not deduplicated. Entries for other
    playlists are skipped without a diagnostic.
    """
    result = MembershipResult()
    for index, element in enumerate(membership_array):
        if not isinstance(element, dict):
            result.diagnostics.append(
                f"Playlist entry #{index}: unexpected JSON in playlist entry array, expected an object, found {json_kind(element)}"
            )
            continue
        try:
            nested = decode_nested_fields(
                element, {"PlaylistId": STRING, "LocalId": UINT32}, require_id=False
            )
        except RecordError as e:
            result.diagnostics.append(f"Playlist entry #{index}: {e}")
            continue
        if nested["PlaylistId"] == playlist_id:
            result.audio_ids.append(nested["LocalId"])
    logger.debug(f"Playlist {playlist_id}: {len(result.audio_ids)} member id(s)")
    return result


__all__ = ["MembershipResult", "resolve_membership"]
