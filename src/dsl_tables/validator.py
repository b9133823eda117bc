"""Body line validation for dsl-tables."""

from __future__ import annotations

import re

from dsl_tables.models import LineError

BODY_TAGS = ("[p]", "[trn]", "[*]")

_LEADING_SPACE_RE = re.compile(r"\s+", re.ASCII)


def has_body_tag(line: str) -> bool:
    return any(tag in line for tag in BODY_TAGS)


def validate_body_line(line: str, line_number: int = 0) -> LineError | None:
    """Check that a body line is indented and carries a known tag.

    Returns:
        LineError if invalid, None if valid
    """
    if not _LEADING_SPACE_RE.match(line):
        return LineError(
            line_number=line_number,
            line=line,
            message="Line is not beginning with spaces",
        )
    if not has_body_tag(line):
        return LineError(
            line_number=line_number,
            line=line,
            message=f"Line is not containing one of expected tags: {','.join(BODY_TAGS)}",
        )
    return None


def orphan_translation_error(line: str, line_number: int = 0) -> LineError:
    """Error for a translation that has no headword to attach to."""
    return LineError(
        line_number=line_number,
        line=line,
        message="Translation before first headword",
    )
