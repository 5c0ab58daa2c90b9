from __future__ import annotations
import click

from .helpers import cli
from ..services.source_service import load_sources
from ..utils.output import diagnostic_lines, error


@cli.group(name='playlists')
@click.pass_context
def playlists_group(ctx: click.Context):
    """List playlists found in the playlist file."""


@playlists_group.command(name='list')
@click.pass_context
def playlists_list(ctx: click.Context):
    """List playlist ids and names, followed by any malformed-record notes."""
    source_set = load_sources(ctx.obj)
    if not source_set.playlists.is_valid:
        click.echo(error(f"Playlist file: {source_set.playlists.full_text()}"))
        ctx.exit(1)
    registry = source_set.registry
    if not len(registry):
        click.echo("No playlists found.")
    else:
        click.echo(f"{'ID':<40} {'Name':<40}")
        click.echo("-" * 81)
        for pl in registry:
            click.echo(f"{pl.id[:40]:<40} {pl.name[:40]:<40}")
        click.echo(f"\nTotal: {len(registry)} playlists")
    for line in diagnostic_lines(registry.diagnostics):
        click.echo(line)

__all__ = ["playlists_group"]
