"""Decoded line source for DSL files."""

from __future__ import annotations

import codecs
from collections.abc import Iterator
from pathlib import Path

from dsl_tables.exceptions import DataImportError

DEFAULT_ENCODING = "utf-16"

_BOM = "\ufeff"


def read_lines(path: str | Path, encoding: str = DEFAULT_ENCODING) -> Iterator[str]:
    """Yield the lines of a dictionary file, decoded and without terminators.

    The file is checked up front; decoding happens lazily while iterating.

    Raises:
        FileNotFoundError: If the file does not exist
        DataImportError: If the encoding is unknown or the bytes don't decode
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise DataImportError(f"Unknown encoding: {encoding!r}") from e

    return _iter_lines(path, encoding)


def _iter_lines(path: Path, encoding: str) -> Iterator[str]:
    try:
        with open(path, "r", encoding=encoding) as f:
            for i, line in enumerate(f):
                line = line.rstrip("\r\n")
                if i == 0:
                    line = line.lstrip(_BOM)
                yield line
    except UnicodeError as e:
        raise DataImportError(f"Failed to decode {path} as {encoding}: {e}") from e
