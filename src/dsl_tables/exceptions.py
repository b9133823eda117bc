"""Custom exception hierarchy for dsl-tables."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dsl_tables.models import LineError


class DslTablesError(Exception):
    """Base exception for all dsl-tables errors."""


class SchemaError(DslTablesError):
    """Table schema and caller disagree (a programming error, not bad data)."""


class ColumnCountError(SchemaError):
    """Row width differs from the table's declared column count."""


class UnknownColumnError(SchemaError):
    """Column name is not declared on the table."""


class CellIndexError(SchemaError, IndexError):
    """Row id or column index is out of range."""


class DuplicateEntityError(SchemaError):
    """Cell mutation would give two rows the same unique key."""


class ParseError(DslTablesError):
    """Source text failed line validation."""

    def __init__(self, errors: list[LineError]):
        self.errors = errors
        self.line = errors[0].line_number if errors else None
        if errors:
            message = str(errors[0])
            if len(errors) > 1:
                message += f" (and {len(errors) - 1} more)"
        else:
            message = "Parse failed"
        super().__init__(message)


class DataImportError(DslTablesError):
    """Failed to read the source text (bad encoding, etc.)."""


class SettingsError(DslTablesError):
    """Malformed settings file or invalid setting value."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        super().__init__(message)
