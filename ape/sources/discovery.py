"""Locate the three data files inside a player installation.

The sync module writes ``<prefix>_playlists.txt`` and
``<prefix>_playlistentries.txt`` into its sync directory; the music organizer
keeps its SQLite catalog at a fixed relative path.
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict
import logging

from ..utils.fs import first_matching_file

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourcePaths:
    playlists: Path | None
    entries: Path | None
    catalog: Path | None


def discover_sources(audials_config: Dict[str, Any]) -> SourcePaths:
    """Find default source files under ``audials_config['path']``.

    Missing installation, directory or file yields None for that source.
    """
    root = audials_config.get("path")
    if not root:
        return SourcePaths(None, None, None)
    root = Path(root)
    sync_dir = root / audials_config["sync_dir"]
    playlists = first_matching_file(sync_dir, audials_config["playlists_pattern"])
    entries = first_matching_file(sync_dir, audials_config["entries_pattern"])
    catalog = root / audials_config["catalog_path"]
    logger.debug(f"Discovered sources under {root}: playlists={playlists}, entries={entries}, catalog={catalog}")
    return SourcePaths(playlists, entries, catalog)


def resolve_source_paths(cfg: Dict[str, Any]) -> SourcePaths:
    """Discovered defaults, each replaced by an explicit ``sources.*`` path when set."""
    discovered = discover_sources(cfg.get("audials", {}))
    overrides = cfg.get("sources", {})

    def pick(key: str, default: Path | None) -> Path | None:
        value = overrides.get(key)
        return Path(value) if value else default

    return SourcePaths(
        playlists=pick("playlists_file", discovered.playlists),
        entries=pick("entries_file", discovered.entries),
        catalog=pick("catalog_file", discovered.catalog),
    )


__all__ = ["SourcePaths", "discover_sources", "resolve_source_paths"]
