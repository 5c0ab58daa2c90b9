"""Export service: copy resolved playlist files into a destination folder.

Each resolved entry is copied to ``<destination>/<file name>``. Failures of
single files are logged and counted; the export carries on with the rest.
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List
import logging
import shutil

from ..catalog import ResolvedAudioEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportMapping:
    source: Path
    destination: Path

    def __str__(self) -> str:
        return f"{self.source} => {self.destination}"


class ExportResult:
    """Results from an export operation."""

    def __init__(self):
        self.copied: List[ExportMapping] = []
        self.skipped: List[ExportMapping] = []  # Destination already present
        self.failed: List[ExportMapping] = []
        self.dry_run = False


def plan_export(entries: Iterable[ResolvedAudioEntry], destination: Path | str) -> List[ExportMapping]:
    """Map each entry to its destination path, preserving order."""
    destination = Path(destination)
    return [
        ExportMapping(Path(entry.real_path), destination / Path(entry.real_path).name)
        for entry in entries
    ]


def export_files(
    mappings: Iterable[ExportMapping],
    overwrite: bool = False,
    dry_run: bool = False,
) -> ExportResult:
    """Copy planned files.

    Args:
        mappings: Output of plan_export
        overwrite: Replace files that exist at the destination (including ones
            written earlier in this run)
        dry_run: Only log what would be copied

    Returns:
        ExportResult listing copied, skipped and failed mappings
    """
    result = ExportResult()
    result.dry_run = dry_run
    written: set[Path] = set()
    for mapping in mappings:
        target = mapping.destination
        exists = target in written or target.exists()
        if exists and not overwrite:
            logger.debug(f"Skipping existing: {target}")
            result.skipped.append(mapping)
            continue
        if dry_run:
            logger.info(str(mapping))
            result.copied.append(mapping)
            written.add(target)
            continue
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(mapping.source, target)
        except OSError as e:
            logger.warning(f"Failed to copy {mapping.source}: {e}")
            result.failed.append(mapping)
            continue
        logger.debug(str(mapping))
        result.copied.append(mapping)
        written.add(target)
    logger.debug(
        f"Export: {len(result.copied)} copied, {len(result.skipped)} skipped, {len(result.failed)} failed"
    )
    return result


__all__ = ["ExportMapping", "ExportResult", "plan_export", "export_files"]
