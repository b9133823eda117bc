"""Single-pass line classifier that fills the dictionary tables."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from pathlib import Path

from dsl_tables.models import LineError, ParseContext, ParseResult, ParseStats
from dsl_tables.reader import read_lines
from dsl_tables.schema import TableSet
from dsl_tables.settings import Settings
from dsl_tables.tags import (
    CONTENTS_LANGUAGE,
    INDEX_LANGUAGE,
    NAME,
    extract_note,
    extract_translation,
    scan_article_title,
    scan_directive,
    scan_header_title,
)
from dsl_tables.validator import (
    has_body_tag,
    orphan_translation_error,
    validate_body_line,
)

logger = logging.getLogger(__name__)


def parse_lines(lines: Iterable[str], *, fail_fast: bool = True) -> ParseResult:
    """Classify decoded lines in order and build the normalized tables.

    Args:
        lines: Decoded source lines; trailing line terminators are ignored
        fail_fast: Stop at the first invalid body line and return no tables.
            When False, invalid lines are recorded and skipped.

    Returns:
        ParseResult with the tables (unless a fail-fast run failed),
        the invalid lines and run statistics
    """
    start_time = time.time()
    tables = TableSet.create()
    ctx = ParseContext()
    stats = ParseStats()
    errors: list[LineError] = []

    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if line_number == 1:
            line = line.lstrip("\ufeff")
        ctx.line_number = line_number
        stats.lines += 1

        if not line.strip():
            stats.blank_lines += 1
            continue

        error = _classify_line(ctx, tables, stats, line)
        if error is None:
            continue

        stats.invalid_lines += 1
        errors.append(error)
        if fail_fast:
            logger.debug(f"Aborting at line {line_number}: {error.message}")
            stats.duration_seconds = time.time() - start_time
            return ParseResult(tables=None, errors=errors, stats=stats)
        logger.warning(str(error))

    stats.duration_seconds = time.time() - start_time
    logger.info(
        f"Parsed {stats.lines} lines: {stats.headwords} headwords, "
        f"{stats.translations} translations, {len(errors)} invalid"
    )
    return ParseResult(tables=tables, errors=errors, stats=stats)


def parse_text(text: str, *, fail_fast: bool = True) -> ParseResult:
    """Parse an already decoded source held in memory."""
    return parse_lines(text.splitlines(), fail_fast=fail_fast)


def parse_file(
    path: str | Path,
    settings: Settings | None = None,
) -> ParseResult:
    """Decode a source file and parse it.

    Raises:
        FileNotFoundError: If the file does not exist
        DataImportError: If the file cannot be decoded
    """
    settings = settings or Settings()
    logger.info(f"Parsing {path} ({settings.encoding})")
    return parse_lines(
        read_lines(path, encoding=settings.encoding),
        fail_fast=settings.fail_fast,
    )


# ---------------------------------------------------------------------------
# Line handlers
# ---------------------------------------------------------------------------

def _classify_line(
    ctx: ParseContext,
    tables: TableSet,
    stats: ParseStats,
    line: str,
) -> LineError | None:
    """Dispatch one non-blank line; first matching kind wins."""
    if _handle_header(ctx, tables, stats, line):
        return None

    # Body tags never appear in headwords; such a line is a misplaced body line.
    title = scan_article_title(line)
    if title is not None and not has_body_tag(line):
        word_id = tables.words.insert(title, ctx.dictionary_id, ctx.source_language_id)
        ctx.start_headword(word_id)
        stats.headwords += 1
        return None

    error = validate_body_line(line, ctx.line_number)
    if error is not None:
        return error
    return _handle_body(ctx, tables, stats, line)


def _handle_header(
    ctx: ParseContext,
    tables: TableSet,
    stats: ParseStats,
    line: str,
) -> bool:
    """Consume a ``#DIRECTIVE "value"`` line. Returns True if consumed."""
    name = scan_header_title(NAME, line)
    if name is not None:
        if ctx.dictionary_id:
            _ignore_directive(stats, line)
        else:
            ctx.dictionary_id = tables.dictionaries.insert(name)
            stats.headers += 1
        return True

    source = scan_header_title(INDEX_LANGUAGE, line)
    if source is not None:
        if ctx.source_language_id:
            _ignore_directive(stats, line)
        else:
            ctx.source_language_id = tables.languages.insert(source)
            stats.headers += 1
        return True

    target = scan_header_title(CONTENTS_LANGUAGE, line)
    if target is not None:
        if ctx.target_language_id:
            _ignore_directive(stats, line)
        else:
            ctx.target_language_id = tables.languages.insert(target)
            stats.headers += 1
        return True

    if scan_directive(line) is not None:
        _ignore_directive(stats, line)
        return True

    return False


def _ignore_directive(stats: ParseStats, line: str) -> None:
    stats.ignored_directives += 1
    logger.debug(f"Ignoring header line: {line!r}")


def _handle_body(
    ctx: ParseContext,
    tables: TableSet,
    stats: ParseStats,
    line: str,
) -> LineError | None:
    """Apply a validated body line to the tables."""
    note = extract_note(line)
    translation = extract_translation(line)

    if translation and not ctx.current_word_id:
        return orphan_translation_error(line, ctx.line_number)

    if note is not None and note.text:
        ctx.current_grammar_type_id = tables.grammar_types.insert(note.text)
        stats.grammar_notes += 1

    if not translation:
        if note is None or not note.text:
            stats.annotations += 1
        return None

    word_to_id = tables.words.insert(translation, ctx.dictionary_id, ctx.target_language_id)
    translation_id = tables.translations.insert(ctx.current_word_id, word_to_id)
    stats.translations += 1

    if note is not None and note.qualifier:
        ctx.current_attribute_id = tables.translation_attributes.insert(note.qualifier)
        tables.attribute_translations.insert(ctx.current_attribute_id, translation_id)
        ctx.current_attribute_id = 0

    if ctx.current_grammar_type_id:
        tables.grammar_type_translations.insert(ctx.current_grammar_type_id, translation_id)

    return None
