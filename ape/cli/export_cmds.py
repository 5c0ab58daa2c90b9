"""Playlist export command."""

from __future__ import annotations
import click
import logging
from pathlib import Path

from .helpers import cli
from .resolve_cmds import run_resolution, echo_resolution
from ..services.export_service import plan_export, export_files
from ..utils.output import section_header, success, warning, error, info

logger = logging.getLogger(__name__)


@cli.command()
@click.argument("playlist")
@click.option("--by-id", is_flag=True, help="Treat PLAYLIST as a playlist id instead of a name")
@click.option("--dest", type=click.Path(file_okay=False, path_type=Path), default=None, help="Destination folder (default: export.directory)")
@click.option("--dry-run", is_flag=True, help="Only show what would be copied")
@click.option("--overwrite/--no-overwrite", default=None, help="Replace files already in the destination")
@click.pass_context
def export(ctx: click.Context, playlist: str, by_id: bool, dest: Path | None, dry_run: bool, overwrite: bool | None):
    """Copy the resolved files of a playlist into a folder."""
    cfg = ctx.obj
    destination = dest or Path(cfg['export']['directory'])
    if overwrite is None:
        overwrite = bool(cfg['export'].get('overwrite', False))

    result = run_resolution(cfg, playlist, by_id)
    echo_resolution(result, cfg['export']['preview_limit'])
    if not result.entries:
        raise click.ClickException("Nothing to export")

    click.echo(section_header(f"{'Previewing export' if dry_run else 'Exporting'} to {destination}"))
    mappings = plan_export(result.entries, destination)
    outcome = export_files(mappings, overwrite=overwrite, dry_run=dry_run)

    for mapping in outcome.copied:
        click.echo(info(str(mapping)))
    for mapping in outcome.skipped:
        click.echo(warning(f"Skipped (exists): {mapping.destination}"))
    for mapping in outcome.failed:
        click.echo(error(f"Failed: {mapping}"))

    verb = "Would copy" if dry_run else "Copied"
    click.echo(success(f"{verb} {len(outcome.copied)} file(s)"))
    if outcome.failed:
        ctx.exit(1)


__all__ = ['export']
