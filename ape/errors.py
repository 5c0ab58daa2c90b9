"""Exception types raised by the resolution engine.

Whole-resource failures (a source file, the catalog, the library root) raise
and invalidate only that resource. Per-record failures (``RecordError``) are
raised by the decoder and turned into diagnostics by the collection
operations, which never abort on a single bad element.
"""

from __future__ import annotations


class ApeError(Exception):
    """Base class. ``str(exc)`` is the full message, ``short`` a menu-sized summary."""

    short = "Error"

    def __init__(self, message: str, short: str | None = None):
        super().__init__(message)
        if short is not None:
            self.short = short


# --- Source files -----------------------------------------------------------

class SourceOpenError(ApeError):
    """The file could not be read."""

    short = "Could not open file"

    def __init__(self, path):
        self.path = path
        if path is None:
            super().__init__("No file found; set the player folder or an explicit path", short="File not found")
        else:
            super().__init__(f"Could not open file '{path}'")


class SourceFormatError(ApeError):
    """The file was read but does not have the expected two-line JSON shape."""

    short = "Could not parse file"


class SourceShapeError(SourceFormatError):
    short = "File has fewer than two lines"

    def __init__(self, path):
        self.path = path
        super().__init__(f"Expected at least 2 lines in file '{path}'")


PARSE_CATEGORIES = {
    "io": "read error",
    "syntax": "syntax error, content is not JSON",
    "data": "JSON data is inconsistent",
    "eof": "JSON ended too early",
}


class SourceParseError(SourceFormatError):
    def __init__(self, path, line: int, column: int, category: str):
        self.path = path
        self.line = line
        self.column = column
        self.category = category
        super().__init__(
            f"Could not parse file '{path}' at [{line}:{column}] of line 2: "
            f"{PARSE_CATEGORIES.get(category, category)}"
        )


class SourceTypeError(SourceFormatError):
    def __init__(self, path, found_kind: str):
        self.path = path
        self.found_kind = found_kind
        super().__init__(f"Unexpected JSON in file '{path}': expected an array, found {found_kind}")


# --- Records ----------------------------------------------------------------

class RecordError(ApeError):
    """One malformed array element; recovered by the caller as a diagnostic."""

    short = "Malformed record"


class MissingFieldError(RecordError):
    def __init__(self, fields, where: str = "record"):
        self.fields = tuple(fields)
        names = " or ".join(self.fields)
        super().__init__(f"Could not find field {names} in {where}")


class FieldTypeError(RecordError):
    def __init__(self, field: str, expected: str, found_kind: str):
        self.field = field
        self.expected = expected
        self.found_kind = found_kind
        super().__init__(f"Field {field} should be {expected}, found {found_kind}")


class NestedParseError(RecordError):
    def __init__(self, text: str, field: str = "payload"):
        self.text = text
        self.field = field
        super().__init__(f"Could not parse string in field {field} '{text}' as a JSON object")


# --- Catalog ----------------------------------------------------------------

class CatalogOpenError(ApeError):
    short = "Could not open catalog"

    def __init__(self, path, reason: str | None = None, short: str | None = None):
        self.path = path
        if path is None:
            message = "No catalog database found; set the player folder or an explicit path"
            short = short or "File not found"
        else:
            message = f"Could not open catalog database '{path}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, short)


class CatalogSchemaError(ApeError):
    """The catalog lacks the table or columns needed for the lookup query."""

    short = "Unexpected catalog schema"

    def __init__(self, path, reason: str):
        self.path = path
        super().__init__(f"Catalog '{path}' cannot be queried: {reason}")


# --- Library ----------------------------------------------------------------

class LibraryRootError(ApeError):
    short = "Invalid library folder"


__all__ = [
    "ApeError",
    "SourceOpenError",
    "SourceFormatError",
    "SourceShapeError",
    "SourceParseError",
    "SourceTypeError",
    "PARSE_CATEGORIES",
    "RecordError",
    "MissingFieldError",
    "FieldTypeError",
    "NestedParseError",
    "CatalogOpenError",
    "CatalogSchemaError",
    "LibraryRootError",
]
