"""Source file status command."""

from __future__ import annotations
import click

from .helpers import cli
from ..services.source_service import load_sources
from ..utils.output import section_header, success, error


@cli.command(name="sources")
@click.pass_context
def sources(ctx: click.Context):
    """Show the playlist, playlist-entries and catalog files and whether they are usable.

    Files are discovered under --audials-path unless given explicitly.
    Exits with status 1 when any of them is invalid.
    """
    source_set = load_sources(ctx.obj)
    click.echo(section_header("Data files"))
    for status in source_set.statuses:
        if status.is_valid:
            click.echo(success(f"{status.label}: {status.short_text()}"))
        else:
            click.echo(error(f"{status.label}: {status.short_text()}"))
            click.echo(f"    {status.full_text()}")
    if not source_set.is_valid:
        ctx.exit(1)
    click.echo(success(f"{len(source_set.registry)} playlist(s) available"))


__all__ = ["sources"]
