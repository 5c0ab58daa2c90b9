"""Source service: evaluate the three data files and build the playlist registry.

Each source is evaluated on its own, so one invalid file does not hide the
state of the others. The registry is built once per valid source set and
reused for every playlist selection.
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging

from ..catalog import check_catalog
from ..errors import ApeError, SourceOpenError, CatalogOpenError
from ..resolve.registry import PlaylistRegistry
from ..sources.decoder import read_json_array
from ..sources.discovery import SourcePaths, resolve_source_paths

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceStatus:
    """Validity of one source file: either a value or the error that invalidated it."""
    label: str
    path: Optional[Path]
    value: Any = None
    error: Optional[ApeError] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    def short_text(self) -> str:
        return str(self.path) if self.is_valid else self.error.short

    def full_text(self) -> str:
        return str(self.path) if self.is_valid else str(self.error)


def _json_source(label: str, path: Optional[Path]) -> SourceStatus:
    if path is None:
        return SourceStatus(label, None, error=SourceOpenError(None))
    try:
        return SourceStatus(label, path, value=read_json_array(path))
    except ApeError as e:
        logger.debug(f"{label} source invalid: {e}")
        return SourceStatus(label, path, error=e)


def _catalog_source(label: str, path: Optional[Path]) -> SourceStatus:
    if path is None:
        return SourceStatus(label, None, error=CatalogOpenError(None))
    try:
        return SourceStatus(label, path, value=check_catalog(path))
    except ApeError as e:
        logger.debug(f"{label} source invalid: {e}")
        return SourceStatus(label, path, error=e)


class SourceSet:
    """The playlist file, the membership file and the catalog, evaluated together."""

    def __init__(self, playlists: SourceStatus, entries: SourceStatus, catalog: SourceStatus):
        self.playlists = playlists
        self.entries = entries
        self.catalog = catalog
        self._registry: PlaylistRegistry | None = None

    @property
    def statuses(self) -> List[SourceStatus]:
        return [self.playlists, self.entries, self.catalog]

    @property
    def is_valid(self) -> bool:
        return all(s.is_valid for s in self.statuses)

    @property
    def registry(self) -> PlaylistRegistry:
        """Registry built from the playlist file; empty when that file is invalid."""
        if self._registry is None:
            if self.playlists.is_valid:
                self._registry = PlaylistRegistry.from_array(self.playlists.value)
            else:
                self._registry = PlaylistRegistry(())
        return self._registry

    @property
    def membership_array(self) -> List[Any]:
        return self.entries.value if self.entries.is_valid else []

    @property
    def catalog_path(self) -> Optional[Path]:
        return self.catalog.value


def evaluate_sources(paths: SourcePaths) -> SourceSet:
    return SourceSet(
        playlists=_json_source("Playlists", paths.playlists),
        entries=_json_source("Playlist entries", paths.entries),
        catalog=_catalog_source("Catalog", paths.catalog),
    )


def load_sources(cfg: Dict[str, Any]) -> SourceSet:
    """Discover (or take from config) the source paths and evaluate them."""
    return evaluate_sources(resolve_source_paths(cfg))


__all__ = ["SourceStatus", "SourceSet", "evaluate_sources", "load_sources"]
