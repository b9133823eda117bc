"""In-memory relational tables with auto-increment ids and unique keys."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import Any

from dsl_tables.exceptions import (
    CellIndexError,
    ColumnCountError,
    DuplicateEntityError,
    SchemaError,
    UnknownColumnError,
)

logger = logging.getLogger(__name__)

ID_COLUMN = "Id"


class EntityStore:
    """A named table of rows under a fixed, ordered column schema.

    Rows get 1-based sequential ids in insertion order; ids are never
    reused. When a unique key is configured with :meth:`mark_unique`,
    inserting a row whose key was already seen returns the id of the
    first row with that key instead of appending.
    """

    def __init__(self, name: str, columns: Sequence[str]):
        if not columns:
            raise SchemaError(f"Table {name!r} must declare at least one column")
        self.name = name
        self._columns = tuple(columns)
        self._rows: list[list[Any]] = []
        self._unique_indices: tuple[int, ...] = ()
        self._unique_values: dict[tuple[str, ...], int] = {}

    @classmethod
    def declare(cls, name: str, columns: Sequence[str]) -> EntityStore:
        """Create an empty store with the given columns."""
        return cls(name, columns)

    @property
    def columns(self) -> tuple[str, ...]:
        return self._columns

    @property
    def unique_columns(self) -> tuple[str, ...]:
        return tuple(self._columns[i] for i in self._unique_indices)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[tuple[int, tuple[Any, ...]]]:
        for row_id, row in enumerate(self._rows, start=1):
            yield row_id, tuple(row)

    def __repr__(self) -> str:
        return f"EntityStore({self.name!r}, columns={list(self._columns)}, rows={len(self)})"

    def column_index(self, column: str) -> int:
        """Return the position of a declared column."""
        try:
            return self._columns.index(column)
        except ValueError:
            raise UnknownColumnError(
                f"Unknown column {column!r} in table {self.name!r}; "
                f"declared: {', '.join(self._columns)}"
            ) from None

    def mark_unique(self, *columns: str) -> None:
        """Use the named columns, in this order, as the dedup key."""
        if not columns:
            raise SchemaError(f"Unique key for table {self.name!r} needs at least one column")
        indices = tuple(self.column_index(c) for c in columns)

        index: dict[tuple[str, ...], int] = {}
        for row_id, row in enumerate(self._rows, start=1):
            key = _make_key(row, indices)
            if key in index:
                raise DuplicateEntityError(
                    f"Rows {index[key]} and {row_id} of table {self.name!r} "
                    f"share unique key {key}"
                )
            index[key] = row_id

        self._unique_indices = indices
        self._unique_values = index

    def insert(self, *values: Any) -> int:
        """Add a row and return its id, or the id of an existing row with the same key."""
        if len(values) != len(self._columns):
            raise ColumnCountError(
                f"Columns count {len(values)} in a row does not correspond to "
                f"the columns count {len(self._columns)} of table {self.name!r}"
            )

        key = None
        if self._unique_indices:
            key = _make_key(values, self._unique_indices)
            existing = self._unique_values.get(key)
            if existing is not None:
                logger.debug(f"{self.name}: key {key} already stored as row {existing}")
                return existing

        self._rows.append(list(values))
        row_id = len(self._rows)
        if key is not None:
            self._unique_values[key] = row_id
        return row_id

    def get(self, row_id: int) -> tuple[Any, ...]:
        """Return the values of one row."""
        return tuple(self._rows[self._row_position(row_id)])

    def find(self, *values: Any) -> int | None:
        """Look up a row id by unique-key values (in unique-column order)."""
        if not self._unique_indices:
            raise SchemaError(f"Table {self.name!r} has no unique key")
        if len(values) != len(self._unique_indices):
            raise ColumnCountError(
                f"Unique key of table {self.name!r} has {len(self._unique_indices)} "
                f"columns, got {len(values)} values"
            )
        return self._unique_values.get(tuple(str(v) for v in values))

    def set_cell(self, row_id: int, column: int | str, value: Any) -> None:
        """Overwrite a single cell in place.

        ``column`` is a 0-based index into the declared columns or a column
        name. The unique index follows the new value.
        """
        position = self._row_position(row_id)
        if isinstance(column, str):
            col = self.column_index(column)
        else:
            if not 0 <= column < len(self._columns):
                raise CellIndexError(
                    f"Column {column} is out of range for table {self.name!r}"
                )
            col = column

        row = self._rows[position]
        if col not in self._unique_indices:
            row[col] = value
            return

        old_key = _make_key(row, self._unique_indices)
        updated = list(row)
        updated[col] = value
        new_key = _make_key(updated, self._unique_indices)
        if new_key != old_key:
            holder = self._unique_values.get(new_key)
            if holder is not None:
                raise DuplicateEntityError(
                    f"Row {holder} of table {self.name!r} already has unique key {new_key}"
                )
            del self._unique_values[old_key]
            self._unique_values[new_key] = row_id
        row[col] = value

    def render(self) -> RenderedTable:
        """Return a textual view of the table (header, rows, caption)."""
        return RenderedTable(self)

    def _row_position(self, row_id: int) -> int:
        if not 1 <= row_id <= len(self._rows):
            raise CellIndexError(f"Row {row_id} is out of range for table {self.name!r}")
        return row_id - 1


class RenderedTable:
    """Lazy string view of an :class:`EntityStore`.

    Iterating yields the header row first, then one row per entity with
    its id prepended. Each iteration starts over and reflects the store's
    current contents.
    """

    def __init__(self, store: EntityStore):
        self._store = store

    @property
    def caption(self) -> str:
        return self._store.name

    @property
    def header(self) -> list[str]:
        return [ID_COLUMN, *self._store.columns]

    def rows(self) -> Iterator[list[str]]:
        for row_id, row in self._store:
            yield [str(row_id), *(str(v) for v in row)]

    def __iter__(self) -> Iterator[list[str]]:
        yield self.header
        yield from self.rows()

    def __len__(self) -> int:
        return len(self._store)


def _make_key(row: Sequence[Any], indices: Sequence[int]) -> tuple[str, ...]:
    return tuple(str(row[i]) for i in indices)
