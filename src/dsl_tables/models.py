"""Parse state and result dataclasses for dsl-tables."""

from __future__ import annotations

from dataclasses import dataclass, field

from dsl_tables.exceptions import ParseError
from dsl_tables.schema import TableSet
from dsl_tables.store import RenderedTable

# ---------------------------------------------------------------------------
# Parse state
# ---------------------------------------------------------------------------

@dataclass
class ParseContext:
    """Session state threaded through the line classifier.

    The dictionary and language ids are set once, from the first matching
    header line. The ``current_*`` ids belong to the headword being read
    and are reset when the next one starts. 0 means "none".
    """

    dictionary_id: int = 0
    source_language_id: int = 0
    target_language_id: int = 0
    current_word_id: int = 0
    current_grammar_type_id: int = 0
    current_attribute_id: int = 0
    line_number: int = 0

    def start_headword(self, word_id: int) -> None:
        self.current_word_id = word_id
        self.current_grammar_type_id = 0
        self.current_attribute_id = 0


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class LineError:
    """An input line that failed validation."""

    line_number: int
    line: str
    message: str

    def __str__(self) -> str:
        return f"Line {self.line_number}: {self.message}: {self.line!r}"


@dataclass
class ParseStats:
    lines: int = 0
    blank_lines: int = 0
    headers: int = 0
    ignored_directives: int = 0
    headwords: int = 0
    translations: int = 0
    grammar_notes: int = 0
    annotations: int = 0
    invalid_lines: int = 0
    duration_seconds: float = 0.0


@dataclass
class ParseResult:
    """Outcome of one parse run.

    A fail-fast run that hit an invalid line has ``tables`` set to None.
    A keep-going run always has tables; ``errors`` lists what was skipped.
    """

    tables: TableSet | None
    errors: list[LineError] = field(default_factory=list)
    stats: ParseStats = field(default_factory=ParseStats)

    @property
    def ok(self) -> bool:
        return self.tables is not None and not self.errors

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def unwrap(self) -> TableSet:
        """Return the tables, raising :class:`ParseError` if the run failed."""
        if not self.ok:
            raise ParseError(self.errors)
        assert self.tables is not None
        return self.tables

    def report_tables(self, *, include_attribute_links: bool = False) -> list[RenderedTable]:
        return self.unwrap().report_tables(include_attribute_links=include_attribute_links)
