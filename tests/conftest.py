"""Shared test fixtures for dsl-tables."""

import pytest

from dsl_tables import EntityStore, TableSet


SAMPLE_DSL = """\
#NAME "TestDict"
#INDEX_LANGUAGE "English"
#CONTENTS_LANGUAGE "French"
cat
 [p]n[/p][trn]chat[/trn]
"""


@pytest.fixture
def sample_text():
    """The minimal English-French dictionary source."""
    return SAMPLE_DSL


@pytest.fixture
def sample_lines():
    """The minimal English-French dictionary as decoded lines."""
    return SAMPLE_DSL.splitlines()


@pytest.fixture
def tables():
    """A fresh set of the eight schema tables."""
    return TableSet.create()


@pytest.fixture
def languages():
    """A deduplicating single-column store."""
    store = EntityStore.declare("languages", ["name"])
    store.mark_unique("name")
    return store


@pytest.fixture
def write_dsl(tmp_path):
    """Write text to a DSL file with the given encoding and return its path."""

    def _write(text, encoding="utf-16", name="dict.dsl"):
        path = tmp_path / name
        path.write_bytes(text.encode(encoding))
        return path

    return _write
