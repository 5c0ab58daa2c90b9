from __future__ import annotations
import os
import logging
from typing import Any, Dict
from pathlib import Path
import copy

logger = logging.getLogger(__name__)

_DEFAULTS: Dict[str, Any] = {
    "log_level": "INFO",
    "audials": {
        "path": None,
        "sync_dir": "LocalAppDataFolder/RapidSolution/Audials_2015/AudialsSync",
        "playlists_pattern": "*_playlists.txt",
        "entries_pattern": "*_playlistentries.txt",
        "catalog_path": "LocalAppDataFolder/RapidSolution/Audials_2015/MusicOrganizer/modb",
    },
    "sources": {
        "playlists_file": None,
        "entries_file": None,
        "catalog_file": None,
    },
    "library": {"path": None},
    "export": {
        "directory": "export",
        "overwrite": False,
        "preview_limit": 50,
    },
}


def deep_merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    """Merge dict b into a (shallow copies) returning new dict.
    Nested dicts are merged recursively; other values override.
    """
    result = dict(a)
    for k, v in b.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = deep_merge(result[k], v)  # type: ignore[arg-type]
        else:
            result[k] = v
    return result


def _load_dotenv(path: Path) -> Dict[str, str]:
    values: Dict[str, str] = {}
    if not path.exists():
        return values
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, val = line.split('=', 1)
        key = key.strip()
        val = val.strip()
        # Strip inline comments starting with # unless inside quotes
        if '#' in val:
            in_single = False
            in_double = False
            result_chars = []
            for ch in val:
                if ch == "'" and not in_double:
                    in_single = not in_single
                elif ch == '"' and not in_single:
                    in_double = not in_double
                if ch == '#' and not in_single and not in_double:
                    break
                result_chars.append(ch)
            val = ''.join(result_chars).rstrip()
        if (val.startswith('"') and val.endswith('"')) or (val.startswith("'") and val.endswith("'")):
            if len(val) >= 2:
                val = val[1:-1]
        if key:
            values[key] = val
    return values


def load_config(overrides: Dict[str, Any] | None = None) -> Dict[str, Any]:
    """Load configuration merging defaults <- .env <- environment <- overrides.

    During test runs (detected via PYTEST_CURRENT_TEST) .env loading is skipped
    unless APE_ENABLE_DOTENV=1 is set to allow deterministic defaults.

    Args:
        overrides: Dict of values to deep-merge last (CLI flags, tests).

    Returns:
        dict: Configuration dictionary (for typed access use load_typed_config()).
    """
    dotenv_values: Dict[str, str] = {}
    if os.environ.get('APE_ENABLE_DOTENV') or not os.environ.get('PYTEST_CURRENT_TEST'):
        dotenv_values = _load_dotenv(Path('.env'))
    cfg: Dict[str, Any] = copy.deepcopy(_DEFAULTS)

    prefix = "APE__"
    # Real environment wins over .env
    combined = {**{k: v for k, v in dotenv_values.items() if k.startswith(prefix)},
                **{k: v for k, v in os.environ.items() if k.startswith(prefix)}}
    for raw_key, value in combined.items():
        path_parts = raw_key[len(prefix):].split("__")
        cursor: Dict[str, Any] = cfg
        for part in path_parts[:-1]:
            cursor = cursor.setdefault(part.lower(), {})  # type: ignore[assignment]
        cursor[path_parts[-1].lower()] = coerce_scalar(value)
    if overrides:
        cfg = deep_merge(cfg, overrides)

    _configure_logging(cfg.get('log_level', 'INFO'))

    return cfg


def load_typed_config(overrides: Dict[str, Any] | None = None):
    """Load configuration as typed AppConfig object.

    Returns:
        AppConfig: Typed configuration object with .to_dict() for dict conversion
    """
    from .config_types import AppConfig
    return AppConfig.from_dict(load_config(overrides))


def _configure_logging(level_str: str) -> None:
    """Configure Python logging based on configured level."""
    level_str = str(level_str).upper()
    level_map = {
        'DEBUG': logging.DEBUG,
        'INFO': logging.INFO,
        'WARNING': logging.WARNING,
        'ERROR': logging.ERROR,
        'CRITICAL': logging.CRITICAL,
    }
    level = level_map.get(level_str, logging.INFO)

    logging.basicConfig(
        level=level,
        format='%(message)s',
        force=True
    )


def coerce_scalar(value: str) -> Any:
    txt = value.strip()
    lower = txt.lower()
    if lower in {"true", "yes", "1"}:
        return True
    if lower in {"false", "no", "0"}:
        return False
    if lower in {"none", "null"}:
        return None
    if txt.isdigit() or (txt.startswith("-") and txt[1:].isdigit()):
        return int(txt)
    try:
        return float(txt)
    except ValueError:
        return txt

__all__ = ["load_config", "deep_merge", "load_typed_config", "coerce_scalar"]
