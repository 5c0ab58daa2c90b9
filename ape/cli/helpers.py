from __future__ import annotations
import click
from typing import Any, Dict

from rapidfuzz import fuzz, process

from ..config import load_typed_config
from ..errors import ApeError
from ..resolve.registry import PlaylistEntry, PlaylistRegistry
from ..services.source_service import SourceSet, load_sources
from ..version import __version__


def _cli_overrides(
    audials_path: str | None,
    library: str | None,
    playlists_file: str | None,
    entries_file: str | None,
    catalog_file: str | None,
) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    if audials_path:
        overrides.setdefault('audials', {})['path'] = audials_path
    if library:
        overrides.setdefault('library', {})['path'] = library
    for key, value in (('playlists_file', playlists_file), ('entries_file', entries_file), ('catalog_file', catalog_file)):
        if value:
            overrides.setdefault('sources', {})[key] = value
    return overrides


@click.group()
@click.version_option(version=__version__, prog_name="audials-playlist-export")
@click.option('--audials-path', type=click.Path(file_okay=False), default=None, help='Player installation folder (for auto-discovery of data files)')
@click.option('--library', type=click.Path(file_okay=False), default=None, help='Local music library folder')
@click.option('--playlists-file', type=click.Path(dir_okay=False), default=None, help='Playlist file (overrides auto-discovery)')
@click.option('--entries-file', type=click.Path(dir_okay=False), default=None, help='Playlist entries file (overrides auto-discovery)')
@click.option('--catalog-file', type=click.Path(dir_okay=False), default=None, help='Catalog database (overrides auto-discovery)')
@click.pass_context
def cli(ctx: click.Context, audials_path, library, playlists_file, entries_file, catalog_file):
    """Export a player playlist to a folder of files from a relocated library.

    \b
    TYPICAL WORKFLOW:

    \b
    Check the data files:
      ape --audials-path /media/Audials sources

    \b
    Pick a playlist:
      ape playlists list

    \b
    Preview and export:
      ape --library "/media/Audials Music" resolve "Road Trip"
      ape --library "/media/Audials Music" export "Road Trip" --dest ~/stick

    \b
    Settings can also come from APE__* environment variables or a .env file,
    e.g. APE__LIBRARY__PATH and APE__AUDIALS__PATH.
    """
    overrides = _cli_overrides(audials_path, library, playlists_file, entries_file, catalog_file)
    if isinstance(ctx.obj, dict):
        # Preloaded config (tests); flags still apply on top
        from ..config import deep_merge
        ctx.obj = deep_merge(ctx.obj, overrides)
    else:
        ctx.obj = load_typed_config(overrides).to_dict()


def require_valid_sources(cfg: Dict[str, Any]) -> SourceSet:
    """Load sources and fail with a usage error naming every invalid one."""
    sources = load_sources(cfg)
    if not sources.is_valid:
        problems = "\n".join(f"  {s.label}: {s.full_text()}" for s in sources.statuses if not s.is_valid)
        raise click.ClickException(f"Invalid source files (run 'ape sources' for details):\n{problems}")
    return sources


def suggest_playlists(registry: PlaylistRegistry, query: str, limit: int = 3) -> list[str]:
    """Closest playlist names for a query that matched nothing."""
    matches = process.extract(query, registry.names(), scorer=fuzz.token_set_ratio, limit=limit, score_cutoff=60)
    return [name for name, _score, _index in matches]


def select_playlist(registry: PlaylistRegistry, key: str, by_id: bool) -> PlaylistEntry:
    playlist = registry.select(key, by_id=by_id)
    if playlist is None:
        message = f"No playlist {'with id' if by_id else 'named'} '{key}'"
        if not by_id:
            suggestions = suggest_playlists(registry, key)
            if suggestions:
                message += ". Did you mean: " + ", ".join(f"'{s}'" for s in suggestions) + "?"
        raise click.UsageError(message)
    return playlist


def fail(exc: ApeError) -> click.ClickException:
    """Wrap an engine error for click (non-zero exit, message on stderr)."""
    return click.ClickException(str(exc))


__all__ = ["cli", "require_valid_sources", "select_playlist", "suggest_playlists", "fail"]
