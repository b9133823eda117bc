__version__ = "0.1.0"

from .exceptions import (
    DslTablesError as DslTablesError,
    SchemaError as SchemaError,
    ColumnCountError as ColumnCountError,
    UnknownColumnError as UnknownColumnError,
    CellIndexError as CellIndexError,
    DuplicateEntityError as DuplicateEntityError,
    ParseError as ParseError,
    DataImportError as DataImportError,
    SettingsError as SettingsError,
)

from .store import (
    EntityStore as EntityStore,
    RenderedTable as RenderedTable,
)

from .schema import (
    TableSet as TableSet,
    REPORT_ORDER as REPORT_ORDER,
)

from .models import (
    ParseContext as ParseContext,
    ParseResult as ParseResult,
    ParseStats as ParseStats,
    LineError as LineError,
)

from .parser import (
    parse_lines as parse_lines,
    parse_text as parse_text,
    parse_file as parse_file,
)

from .reader import read_lines as read_lines

from .settings import (
    Settings as Settings,
    load_settings as load_settings,
)

__all__ = [
    # Exceptions
    "DslTablesError",
    "SchemaError",
    "ColumnCountError",
    "UnknownColumnError",
    "CellIndexError",
    "DuplicateEntityError",
    "ParseError",
    "DataImportError",
    "SettingsError",
    # Tables
    "EntityStore",
    "RenderedTable",
    "TableSet",
    "REPORT_ORDER",
    # Parse state and results
    "ParseContext",
    "ParseResult",
    "ParseStats",
    "LineError",
    # Functions
    "parse_lines",
    "parse_text",
    "parse_file",
    "read_lines",
    "Settings",
    "load_settings",
]
