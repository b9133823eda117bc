"""Tag extraction for DSL dictionary lines.

Each function looks at one decoded line and returns the fragment it is
after, or ``None`` when the line does not contain it. A malformed tag
sequence is simply "not found"; nothing here raises.

Tag grammar::

    #NAME "English-French"           header directives
    cat                              headword (not indented, not "[")
     [m1]1) [p]n[/p] [trn]chat[/trn] body line
     [*][ref]kitten[/ref][/*]        relation annotation
"""

from __future__ import annotations

import functools
import re
from typing import NamedTuple

NAME = "#NAME"
INDEX_LANGUAGE = "#INDEX_LANGUAGE"
CONTENTS_LANGUAGE = "#CONTENTS_LANGUAGE"

_TAG_RE = re.compile(r"\[.*?\]")
_SPACES_RE = re.compile(r"\s{2,}", re.ASCII)
_DIRECTIVE_RE = re.compile(r'#([A-Z_]+)\s*"(.*)"', re.ASCII)
_ARTICLE_TITLE_RE = re.compile(r"[^\s\[].*", re.ASCII)
_TRANSLATION_RE = re.compile(r"\[trn\](.*?)\[/trn\]")
_NOTE_RE = re.compile(r"\[p.*?\](\[c\s*(.*?)\])?(.*?)\[/", re.ASCII)
_INDEX_RE = re.compile(r"\s*\[.*?\](\d*)[)|.]", re.ASCII)
_RELATION_RE = re.compile(r"\[\*\](.*)?\[/\*\]")
_STYLE_SEGMENT_RE = re.compile(r".*\[/.*?\](.*)\[trn\]")
_COLOR_RE = re.compile(r"\[c (.*?)\]")


class Note(NamedTuple):
    """Grammar note from a ``[p]`` block."""

    qualifier: str  # value of an inner [c ...] tag, "" if none
    text: str


class Relation(NamedTuple):
    """Content of a ``[*]...[/*]`` annotation; one field is always empty."""

    comment: str
    reference: str


class TranslationStyle(NamedTuple):
    color: str
    italic: bool


def cleanup_line(text: str) -> str:
    """Drop every bracketed tag and squeeze whitespace runs to one space."""
    result = _TAG_RE.sub("", text)
    result = _SPACES_RE.sub(" ", result)
    return result.strip()


@functools.lru_cache(maxsize=None)
def _header_pattern(prefix: str) -> re.Pattern[str]:
    return re.compile(rf'{re.escape(prefix)}\s*"(.*)"', re.ASCII)


def scan_header_title(prefix: str, line: str) -> str | None:
    """Return the quoted value of a ``<prefix> "value"`` line."""
    match = _header_pattern(prefix).match(line)
    if match is None:
        return None
    return match.group(1)


def scan_directive(line: str) -> tuple[str, str] | None:
    """Return ``(NAME, value)`` for any ``#NAME "value"`` header line."""
    match = _DIRECTIVE_RE.match(line)
    if match is None:
        return None
    return "#" + match.group(1), match.group(2)


def scan_article_title(line: str) -> str | None:
    """Return the line itself when it starts a new headword article."""
    match = _ARTICLE_TITLE_RE.match(line)
    if match is None:
        return None
    return match.group(0)


def extract_translation(line: str) -> str | None:
    """Text of the first ``[trn]...[/trn]`` block, tags stripped."""
    match = _TRANSLATION_RE.search(line)
    if match is None:
        return None
    return cleanup_line(match.group(1))


def extract_note(line: str) -> Note | None:
    """Grammar note of the first ``[p...]`` block.

    The block may open with a ``[c <value>]`` sub-tag, whose value is
    returned as the qualifier; the text runs up to the next closing tag.
    """
    match = _NOTE_RE.search(line)
    if match is None:
        return None
    return Note(qualifier=match.group(2) or "", text=cleanup_line(match.group(3)))


def extract_index(line: str) -> int:
    """Meaning number of a body line such as ``[m1]2) ...``; 0 if none."""
    match = _INDEX_RE.match(line)
    if match is None or not match.group(1):
        return 0
    return int(match.group(1))


def extract_relation(line: str) -> Relation | None:
    """Content of the ``[*]...[/*]`` annotation on a line."""
    match = _RELATION_RE.search(line)
    if match is None:
        return None
    body = match.group(1) or ""
    if "[ref]" in body:
        return Relation(comment="", reference=cleanup_line(body))
    return Relation(comment=cleanup_line(body), reference="")


def extract_translation_style(line: str) -> TranslationStyle | None:
    """Colour and italic markup right before the ``[trn]`` tag."""
    match = _STYLE_SEGMENT_RE.match(line)
    if match is None:
        return None
    segment = match.group(1)
    color = _COLOR_RE.search(segment)
    return TranslationStyle(
        color=color.group(1) if color else "",
        italic="[i]" in segment,
    )
