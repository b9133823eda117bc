"""Tests for tag extraction."""

import pytest

from dsl_tables.tags import (
    CONTENTS_LANGUAGE,
    INDEX_LANGUAGE,
    NAME,
    Note,
    Relation,
    TranslationStyle,
    cleanup_line,
    extract_index,
    extract_note,
    extract_relation,
    extract_translation,
    extract_translation_style,
    scan_article_title,
    scan_directive,
    scan_header_title,
)


class TestCleanupLine:
    """Tests for cleanup_line()."""

    def test_strips_tags_and_squeezes_spaces(self):
        assert cleanup_line("[m1]1) [p]n[/p]  [trn]chat[/trn]") == "1) n chat"

    def test_trims(self):
        assert cleanup_line("   le   chat  ") == "le chat"

    def test_only_tags(self):
        assert cleanup_line("[i][/i]") == ""


class TestScanHeaderTitle:
    """Tests for scan_header_title()."""

    @pytest.mark.parametrize("line,expected", [
        ('#NAME "TestDict"', "TestDict"),
        ('#NAME"TestDict"', "TestDict"),
        ('#NAME\t"Big  Dict"', "Big  Dict"),
        ('#NAME ""', ""),
    ])
    def test_quoted_value(self, line, expected):
        assert scan_header_title(NAME, line) == expected

    def test_value_runs_to_last_quote(self):
        assert scan_header_title(NAME, '#NAME "a" "b"') == 'a" "b'

    @pytest.mark.parametrize("line", [
        "#NAME TestDict",
        ' #NAME "TestDict"',
        '#INDEX_LANGUAGE "English"',
        "cat",
    ])
    def test_no_match(self, line):
        assert scan_header_title(NAME, line) is None

    def test_language_prefixes(self):
        assert scan_header_title(INDEX_LANGUAGE, '#INDEX_LANGUAGE "English"') == "English"
        assert scan_header_title(CONTENTS_LANGUAGE, '#CONTENTS_LANGUAGE "French"') == "French"


class TestScanDirective:
    """Tests for scan_directive()."""

    def test_any_directive(self):
        assert scan_directive('#SOURCE_CODE_PAGE "EasternEuropean"') == (
            "#SOURCE_CODE_PAGE", "EasternEuropean",
        )

    def test_not_a_directive(self):
        assert scan_directive("#hashtag") is None
        assert scan_directive("cat") is None


class TestScanArticleTitle:
    """Tests for scan_article_title()."""

    @pytest.mark.parametrize("line", ["cat", "cat [kæt]", "ice cream", "#hashtag"])
    def test_headword(self, line):
        assert scan_article_title(line) == line

    @pytest.mark.parametrize("line", [
        " [trn]chat[/trn]",
        "\t[p]n[/p]",
        "[m1]1) chat",
        "",
    ])
    def test_not_headword(self, line):
        assert scan_article_title(line) is None


class TestExtractTranslation:
    """Tests for extract_translation()."""

    def test_simple(self):
        assert extract_translation(" [p]n[/p][trn]chat[/trn]") == "chat"

    def test_inner_tags_removed(self):
        assert extract_translation(" [trn][i]le[/i]   chat[/trn]") == "le chat"

    def test_first_block_only(self):
        """Test that only the first translation block is extracted."""
        assert extract_translation(" [trn]a[/trn], [trn]b[/trn]") == "a"

    def test_missing(self):
        assert extract_translation(" [p]n[/p]") is None

    def test_unclosed(self):
        assert extract_translation(" [trn]chat") is None

    def test_empty_block(self):
        assert extract_translation(" [trn] [/trn]") == ""


class TestExtractNote:
    """Tests for extract_note()."""

    def test_plain_note(self):
        assert extract_note(" [p]n[/p][trn]chat[/trn]") == Note(qualifier="", text="n")

    def test_qualifier(self):
        note = extract_note(" [p][c green]adj[/c][/p]")
        assert note.qualifier == "green"
        assert note.text == "adj"

    def test_p_prefixed_tag(self):
        assert extract_note(" [pos]verb[/pos]") == Note(qualifier="", text="verb")

    def test_text_cleaned(self):
        assert extract_note(" [p]  noun   pl [/p]").text == "noun pl"

    def test_colour_not_directly_after_p(self):
        note = extract_note(" [p]v[/p] [c red]informal[/c] [trn]x[/trn]")
        assert note == Note(qualifier="", text="v")

    def test_missing(self):
        assert extract_note(" [trn]chat[/trn]") is None


class TestExtractIndex:
    """Tests for extract_index()."""

    @pytest.mark.parametrize("line,expected", [
        (" [m1]2) [trn]chat[/trn]", 2),
        (" [m1]13. [trn]chat[/trn]", 13),
        (" [m1]4| [trn]chat[/trn]", 4),
        (" [m1][trn]chat[/trn]", 0),
        ("cat", 0),
    ])
    def test_index(self, line, expected):
        assert extract_index(line) == expected


class TestExtractRelation:
    """Tests for extract_relation()."""

    def test_reference(self):
        assert extract_relation(" [*][ref]kitten[/ref][/*]") == Relation(comment="", reference="kitten")

    def test_comment(self):
        assert extract_relation(" [*]see also  dog[/*]") == Relation(comment="see also dog", reference="")

    def test_missing(self):
        assert extract_relation(" [trn]chat[/trn]") is None


class TestExtractTranslationStyle:
    """Tests for extract_translation_style()."""

    def test_colour_and_italic(self):
        style = extract_translation_style(" [p]n[/p] [i][c blue]fam. [trn]chat[/trn]")
        assert style == TranslationStyle(color="blue", italic=True)

    def test_plain(self):
        style = extract_translation_style(" [p]n[/p] [trn]chat[/trn]")
        assert style == TranslationStyle(color="", italic=False)

    def test_no_closing_tag_before_translation(self):
        assert extract_translation_style(" [trn]chat[/trn]") is None
