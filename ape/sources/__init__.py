"""Readers for the exported playlist data files and their discovery."""

from .decoder import (
    NestedRecord,
    decode_nested_fields,
    json_kind,
    parse_json_array_text,
    read_json_array,
)

__all__ = [
    "NestedRecord",
    "decode_nested_fields",
    "json_kind",
    "parse_json_array_text",
    "read_json_array",
]
