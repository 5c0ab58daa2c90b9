"""Decoding of the two-line JSON text files written by the player's sync module.

Line 1 of each file is a format marker and is ignored; line 2 holds a JSON
array. Array elements carry a ``payload`` field whose value is a *string*
containing JSON text, so reading a record means decoding twice:
outer object -> payload string -> nested object -> named field.
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping

from ..errors import (
    FieldTypeError,
    MissingFieldError,
    NestedParseError,
    SourceOpenError,
    SourceParseError,
    SourceShapeError,
    SourceTypeError,
)

logger = logging.getLogger(__name__)

UINT32_MAX = 0xFFFFFFFF

# Expected nested field types understood by decode_nested_fields
STRING = "string"
UINT32 = "uint32"

_EXPECTED_TEXT = {
    STRING: "a string",
    UINT32: "an unsigned 32-bit integer",
}


def json_kind(value: Any) -> str:
    """Name the JSON kind of a decoded value (for diagnostics)."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, list):
        return "array"
    return type(value).__name__


def _split_lines(content: str) -> List[str]:
    # '\n'-separated, trailing '\r' dropped, no phantom line after a final newline
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _reject_constant(name: str):
    raise ValueError(name)


def parse_json_array_text(content: str, path: Path | str = "<text>") -> List[Any]:
    """Parse already-read file content into the JSON array held on line 2.

    Raises:
        SourceShapeError: fewer than two lines
        SourceParseError: line 2 is not valid JSON
        SourceTypeError: line 2 is valid JSON but not an array
    """
    lines = _split_lines(content)
    if len(lines) < 2:
        raise SourceShapeError(path)
    candidate = lines[1]
    try:
        value = json.loads(candidate, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        category = "eof" if e.pos >= len(candidate.rstrip()) else "syntax"
        raise SourceParseError(path, e.lineno, e.colno, category) from e
    except ValueError as e:
        # NaN/Infinity literals and numbers the parser refuses to build
        token = str(e)
        column = candidate.find(token) + 1 if token and token in candidate else 1
        category = "syntax" if token in ("NaN", "Infinity", "-Infinity") else "data"
        raise SourceParseError(path, 1, column, category) from e
    except RecursionError as e:
        raise SourceParseError(path, 1, 1, "data") from e
    if not isinstance(value, list):
        raise SourceTypeError(path, json_kind(value))
    return value


def read_json_array(path: Path | str) -> List[Any]:
    """Read a two-line source file and return the JSON array on its second line.

    Raises:
        SourceOpenError: the file cannot be read as UTF-8 text
        SourceShapeError, SourceParseError, SourceTypeError: see parse_json_array_text
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Failed to read {path}: {e}")
        raise SourceOpenError(path) from e
    array = parse_json_array_text(content, path)
    logger.debug(f"Decoded {len(array)} record(s) from {path}")
    return array


@dataclass
class NestedRecord:
    """Fields pulled out of a double-encoded record."""
    record_id: str | None
    values: Dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Any:
        return self.values[key]


def _check_type(name: str, value: Any, expected: str) -> Any:
    if expected == STRING:
        if isinstance(value, str):
            return value
    elif expected == UINT32:
        if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= UINT32_MAX:
            return value
    else:  # pragma: no cover - programming error
        raise ValueError(f"Unknown expected type: {expected}")
    raise FieldTypeError(name, _EXPECTED_TEXT[expected], json_kind(value))


def decode_nested_fields(
    record: Mapping[str, Any],
    fields: Mapping[str, str],
    require_id: bool = True,
    payload_field: str = "payload",
    id_field: str = "id",
) -> NestedRecord:
    """Decode a record whose ``payload`` field is a JSON-formatted string.

    Args:
        record: Outer JSON object
        fields: Nested field name -> expected type (``"string"`` or ``"uint32"``),
            checked in the given order
        require_id: Also require an outer string ``id`` field
        payload_field: Name of the outer field holding the JSON text
        id_field: Name of the outer id field

    Returns:
        NestedRecord with the outer id (or None) and the requested nested values

    Raises:
        MissingFieldError: payload/id absent, or a nested field absent
        FieldTypeError: payload/id not a string, or a nested field of the wrong kind
        NestedParseError: payload string is not JSON text
    """
    required = (payload_field, id_field) if require_id else (payload_field,)
    if any(name not in record for name in required):
        raise MissingFieldError(required, "record object")

    payload_text = record[payload_field]
    if not isinstance(payload_text, str):
        raise FieldTypeError(payload_field, _EXPECTED_TEXT[STRING], json_kind(payload_text))
    record_id = None
    if require_id:
        record_id = record[id_field]
        if not isinstance(record_id, str):
            raise FieldTypeError(id_field, _EXPECTED_TEXT[STRING], json_kind(record_id))

    try:
        nested = json.loads(payload_text)
    except (ValueError, RecursionError) as e:
        raise NestedParseError(payload_text, payload_field) from e

    result = NestedRecord(record_id=record_id)
    for name, expected in fields.items():
        if not isinstance(nested, dict) or name not in nested:
            raise MissingFieldError((name,), f"{payload_field} object '{payload_text}'")
        result.values[name] = _check_type(name, nested[name], expected)
    return result


__all__ = [
    "STRING",
    "UINT32",
    "NestedRecord",
    "decode_nested_fields",
    "json_kind",
    "parse_json_array_text",
    "read_json_array",
]
