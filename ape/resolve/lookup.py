"""Catalog lookup of audio ids and reconciliation of their stored paths.

Each id may match zero, one or several catalog rows. Rows are tried in
catalog order until one reconciles to an existing local file; that row is
accepted and every row after it is reported as an extra occurrence.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Sequence
import logging
import sqlite3

from ..catalog.interface import CatalogInterface
from ..catalog.models import CatalogRow, ResolvedAudioEntry
from ..utils.path_format import reconcile_stored_path

logger = logging.getLogger(__name__)

Reconciler = Callable[[str, Path], Optional[str]]


@dataclass
class LookupResult:
    """One record slot per input id (None when unresolved) plus diagnostics."""
    records: List[Optional[ResolvedAudioEntry]] = field(default_factory=list)
    diagnostics: List[str] = field(default_factory=list)

    @property
    def resolved(self) -> List[ResolvedAudioEntry]:
        return [r for r in self.records if r is not None]


def _lookup_one(
    audio_id: int,
    rows: Sequence,
    library_root: Path,
    diagnostics: List[str],
    reconcile: Reconciler,
) -> Optional[ResolvedAudioEntry]:
    if not rows:
        diagnostics.append(f"audio_id={audio_id} is not in the catalog, unresolved")
        return None

    accepted: Optional[ResolvedAudioEntry] = None
    for position, raw in enumerate(rows, start=1):
        try:
            row = CatalogRow.from_row(raw)
        except ValueError as e:
            if accepted is not None:
                diagnostics.append(
                    f"Extra invalid occurrence #{position} of audio_id={audio_id} in the catalog ({e}); "
                    f"already using '{accepted.real_path}'"
                )
            else:
                diagnostics.append(f"Could not read catalog row #{position} for audio_id={audio_id}: {e}")
            continue

        real_path = reconcile(row.stored_path, library_root)
        if accepted is not None:
            if real_path is not None:
                diagnostics.append(
                    f"Extra occurrence #{position} of audio_id={audio_id} ('{row.title}') with path "
                    f"'{real_path}'; already using '{accepted.real_path}'"
                )
            else:
                diagnostics.append(
                    f"Extra invalid occurrence #{position} of audio_id={audio_id} ('{row.title}'): "
                    f"stored path '{row.stored_path}' not found in library; already using '{accepted.real_path}'"
                )
            continue

        if real_path is None:
            diagnostics.append(
                f"Could not find stored path '{row.stored_path}' in library for audio_id={audio_id} "
                f"('{row.title}'), catalog row #{position}"
            )
            continue
        accepted = ResolvedAudioEntry(title=row.title, artist=row.artist, real_path=real_path)
    return accepted


def lookup_audio(
    audio_ids: Sequence[int],
    catalog: CatalogInterface,
    library_root: Path | str,
    reconcile: Reconciler = reconcile_stored_path,
) -> LookupResult:
    """Look up every id in the catalog and reconcile its stored path.

    Raises:
        CatalogSchemaError: the lookup query cannot be built for this catalog
    """
    library_root = Path(library_root)
    catalog.prepare_lookup()

    result = LookupResult()
    for audio_id in audio_ids:
        try:
            rows = catalog.rows_for_id(audio_id)
        except sqlite3.Error as e:
            logger.debug(f"Query for id={audio_id} failed: {e}")
            result.diagnostics.append(f"query construction failed for id={audio_id}")
            result.records.append(None)
            continue
        result.records.append(_lookup_one(audio_id, rows, library_root, result.diagnostics, reconcile))
    return result


__all__ = ["LookupResult", "lookup_audio"]
