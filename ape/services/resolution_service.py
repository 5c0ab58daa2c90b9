"""Resolution service: from a selected playlist to existing local files.

membership ids -> catalog rows -> reconciled local paths. Every run starts
from scratch; the only state shared between runs is the immutable playlist
registry owned by the caller.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Sequence
import logging
import time

from ..catalog import Catalog, ResolvedAudioEntry
from ..errors import LibraryRootError
from ..resolve.lookup import lookup_audio
from ..resolve.membership import resolve_membership
from ..resolve.registry import PlaylistEntry

logger = logging.getLogger(__name__)


@dataclass
class ResolutionResult:
    """Resolved entries in playlist order plus the full diagnostic log."""
    playlist: PlaylistEntry
    entries: List[ResolvedAudioEntry] = field(default_factory=list)
    diagnostics: List[str] = field(default_factory=list)
    member_count: int = 0
    duration_seconds: float = 0.0

    @property
    def unresolved_count(self) -> int:
        return self.member_count - len(self.entries)


def validate_library_root(path: Path | str | None) -> Path:
    """Check the library root is an existing, named directory and return it as an absolute path.

    Raises:
        LibraryRootError: not configured, missing, not a directory, or nameless
    """
    if not path:
        raise LibraryRootError("Library folder is not configured (use --library or APE__LIBRARY__PATH)")
    root = Path(path).expanduser().resolve()
    if not root.is_dir():
        raise LibraryRootError(f"Library folder '{root}' does not exist or is not a directory")
    if not root.name:
        raise LibraryRootError(f"Library folder '{root}' has no folder name to look for in catalog paths")
    return root


def resolve_playlist(
    playlist: PlaylistEntry,
    membership_array: Sequence[Any],
    catalog_path: Path | str,
    library_root: Path | str,
) -> ResolutionResult:
    """Resolve one playlist into existing local files.

    The catalog is opened read-only for the duration of this call only.

    Raises:
        LibraryRootError: invalid library root
        CatalogOpenError: catalog cannot be opened
        CatalogSchemaError: catalog lacks the expected table/columns
    """
    start = time.time()
    library_root = validate_library_root(library_root)
    result = ResolutionResult(playlist=playlist)

    membership = resolve_membership(playlist.id, membership_array)
    result.member_count = len(membership.audio_ids)
    result.diagnostics.extend(membership.diagnostics)

    with Catalog.open(catalog_path) as catalog:
        lookup = lookup_audio(membership.audio_ids, catalog, library_root)
    result.entries.extend(lookup.resolved)
    result.diagnostics.extend(lookup.diagnostics)

    for message in result.diagnostics:
        logger.debug(message)
    result.duration_seconds = time.time() - start
    logger.debug(
        f"Resolved '{playlist.name}' ({playlist.id}): {len(result.entries)}/{result.member_count} "
        f"in {result.duration_seconds:.2f}s"
    )
    return result


__all__ = ["ResolutionResult", "resolve_playlist", "validate_library_root"]
