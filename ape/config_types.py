"""Typed configuration dataclasses for audials-playlist-export.

Provides strongly-typed configuration objects next to the plain dict
returned by :func:`ape.config.load_config`.
"""
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Dict, Any


@dataclass
class AudialsConfig:
    """Location of the player installation and of its data files inside it."""
    path: str | None = None
    sync_dir: str = "LocalAppDataFolder/RapidSolution/Audials_2015/AudialsSync"
    playlists_pattern: str = "*_playlists.txt"
    entries_pattern: str = "*_playlistentries.txt"
    catalog_path: str = "LocalAppDataFolder/RapidSolution/Audials_2015/MusicOrganizer/modb"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class SourcesConfig:
    """Explicit source file paths; None means auto-discover."""
    playlists_file: str | None = None
    entries_file: str | None = None
    catalog_file: str | None = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class LibraryConfig:
    """Local (possibly relocated) music library."""
    path: str | None = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ExportConfig:
    """Copy destination and behaviour."""
    directory: str = "export"
    overwrite: bool = False
    preview_limit: int = 50

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class AppConfig:
    """Root application configuration with all subsections."""
    log_level: str = "INFO"
    audials: AudialsConfig = field(default_factory=AudialsConfig)
    sources: SourcesConfig = field(default_factory=SourcesConfig)
    library: LibraryConfig = field(default_factory=LibraryConfig)
    export: ExportConfig = field(default_factory=ExportConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to nested dictionary matching the load_config() format."""
        return {
            "log_level": self.log_level,
            "audials": self.audials.to_dict(),
            "sources": self.sources.to_dict(),
            "library": self.library.to_dict(),
            "export": self.export.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AppConfig:
        """Create typed config from dictionary (as returned by load_config)."""
        return cls(
            log_level=data.get("log_level", "INFO"),
            audials=AudialsConfig(**data.get("audials", {})),
            sources=SourcesConfig(**data.get("sources", {})),
            library=LibraryConfig(**data.get("library", {})),
            export=ExportConfig(**data.get("export", {})),
        )


__all__ = [
    "AppConfig",
    "AudialsConfig",
    "SourcesConfig",
    "LibraryConfig",
    "ExportConfig",
]
