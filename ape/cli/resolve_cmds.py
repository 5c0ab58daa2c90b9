"""Playlist resolution command."""

from __future__ import annotations
import click
import logging

from .helpers import cli, require_valid_sources, select_playlist, fail
from ..errors import ApeError
from ..services.resolution_service import ResolutionResult, resolve_playlist
from ..utils.output import section_header, count_badge, diagnostic_lines, divider, info, warning

logger = logging.getLogger(__name__)


def run_resolution(cfg, playlist_key: str, by_id: bool) -> ResolutionResult:
    sources = require_valid_sources(cfg)
    playlist = select_playlist(sources.registry, playlist_key, by_id)
    try:
        return resolve_playlist(
            playlist=playlist,
            membership_array=sources.membership_array,
            catalog_path=sources.catalog_path,
            library_root=cfg['library']['path'],
        )
    except ApeError as e:
        raise fail(e) from e


def echo_resolution(result: ResolutionResult, limit: int) -> None:
    click.echo(section_header(f"Playlist '{result.playlist.name}' ({result.playlist.id})"))
    click.echo(
        f"{count_badge(len(result.entries), 'file(s) will be exported', 'green')} "
        f"of {result.member_count} entr{'y' if result.member_count == 1 else 'ies'}"
    )
    for entry in result.entries[:limit]:
        click.echo(info(f"{entry.artist} - {entry.title}: {entry.real_path}"))
    if len(result.entries) > limit:
        click.echo(f"  ... showing first {limit} of {len(result.entries)}")
    if result.diagnostics:
        click.echo(divider())
        click.echo(warning(f"{len(result.diagnostics)} note(s):"))
        for line in diagnostic_lines(result.diagnostics):
            click.echo(line)


@cli.command(name="resolve")
@click.argument("playlist")
@click.option("--by-id", is_flag=True, help="Treat PLAYLIST as a playlist id instead of a name")
@click.option("--limit", type=int, default=None, help="How many resolved files to list (default: export.preview_limit)")
@click.pass_context
def resolve(ctx: click.Context, playlist: str, by_id: bool, limit: int | None):
    """Find the local files of a playlist without copying anything.

    Lists the resolved files and every note about skipped, ambiguous or
    missing entries.

    Example:
        ape --library "/media/Audials Music" resolve "Road Trip"
    """
    cfg = ctx.obj
    result = run_resolution(cfg, playlist, by_id)
    echo_resolution(result, limit if limit is not None else cfg['export']['preview_limit'])


__all__ = ["resolve", "run_resolution", "echo_resolution"]
