"""Table declarations for the normalized dictionary schema."""

from __future__ import annotations

from dataclasses import dataclass

from dsl_tables.store import EntityStore, RenderedTable

# ---------------------------------------------------------------------------
# Table names and columns
# ---------------------------------------------------------------------------

WORDS = "words"
DICTIONARIES = "dictionaries"
LANGUAGES = "languages"
TRANSLATIONS = "translations"
GRAMMAR_TYPES = "grammar_types"
GRAMMAR_TYPES_TRANSLATIONS = "grammar_types_translations"
TRANSLATION_ATTRIBUTES = "translation_attributes"
TRANSLATION_ATTRIBUTES_TRANSLATIONS = "translation_attributes_translations"

# name -> (columns, unique key)
TABLE_DEFINITIONS: dict[str, tuple[tuple[str, ...], tuple[str, ...]]] = {
    WORDS: (("text", "dictionary_id", "language_id"), ()),
    DICTIONARIES: (("name",), ()),
    LANGUAGES: (("name",), ("name",)),
    TRANSLATIONS: (
        ("word_from_id", "word_to_id"),
        ("word_from_id", "word_to_id"),
    ),
    GRAMMAR_TYPES: (("value",), ("value",)),
    GRAMMAR_TYPES_TRANSLATIONS: (
        ("grammar_type_id", "translation_id"),
        ("grammar_type_id", "translation_id"),
    ),
    TRANSLATION_ATTRIBUTES: (("value",), ("value",)),
    TRANSLATION_ATTRIBUTES_TRANSLATIONS: (
        ("attribute_id", "translation_id"),
        ("attribute_id", "translation_id"),
    ),
}

# The attribute join table is populated but left out of the default report.
REPORT_ORDER: tuple[str, ...] = (
    WORDS,
    DICTIONARIES,
    LANGUAGES,
    TRANSLATIONS,
    GRAMMAR_TYPES,
    GRAMMAR_TYPES_TRANSLATIONS,
    TRANSLATION_ATTRIBUTES,
)


def declare_table(name: str) -> EntityStore:
    """Create one store from :data:`TABLE_DEFINITIONS`."""
    columns, unique = TABLE_DEFINITIONS[name]
    store = EntityStore.declare(name, columns)
    if unique:
        store.mark_unique(*unique)
    return store


@dataclass
class TableSet:
    """The eight stores filled by one parse run."""

    words: EntityStore
    dictionaries: EntityStore
    languages: EntityStore
    translations: EntityStore
    grammar_types: EntityStore
    grammar_type_translations: EntityStore
    translation_attributes: EntityStore
    attribute_translations: EntityStore

    @classmethod
    def create(cls) -> TableSet:
        return cls(
            words=declare_table(WORDS),
            dictionaries=declare_table(DICTIONARIES),
            languages=declare_table(LANGUAGES),
            translations=declare_table(TRANSLATIONS),
            grammar_types=declare_table(GRAMMAR_TYPES),
            grammar_type_translations=declare_table(GRAMMAR_TYPES_TRANSLATIONS),
            translation_attributes=declare_table(TRANSLATION_ATTRIBUTES),
            attribute_translations=declare_table(TRANSLATION_ATTRIBUTES_TRANSLATIONS),
        )

    def all(self) -> list[EntityStore]:
        return [
            self.words,
            self.dictionaries,
            self.languages,
            self.translations,
            self.grammar_types,
            self.grammar_type_translations,
            self.translation_attributes,
            self.attribute_translations,
        ]

    def by_name(self, name: str) -> EntityStore:
        for store in self.all():
            if store.name == name:
                return store
        raise KeyError(name)

    def report_tables(self, *, include_attribute_links: bool = False) -> list[RenderedTable]:
        """Rendered tables in report order."""
        names = list(REPORT_ORDER)
        if include_attribute_links:
            names.append(TRANSLATION_ATTRIBUTES_TRANSLATIONS)
        return [self.by_name(name).render() for name in names]

    def counts(self) -> dict[str, int]:
        return {store.name: len(store) for store in self.all()}
