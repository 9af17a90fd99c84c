"""Tests for the FTS5 query builder."""

import pytest

from thailaw.search.fts_query import (
    EMPTY_PHRASE,
    MAX_QUERY_LENGTH,
    build_search_query,
    sanitise_token,
)


class TestNaturalLanguage:
    """Test plain queries become prefix phrases with an OR fallback."""

    def test_single_token(self):
        """Test one word."""
        variants = build_search_query("consent")

        assert variants.primary == '"consent"*'
        assert variants.fallback == '"consent"*'

    def test_multiple_tokens(self):
        """Test words are ANDed in primary and ORed in fallback."""
        variants = build_search_query("personal data")

        assert variants.primary == '"personal"* "data"*'
        assert variants.fallback == '"personal"* OR "data"*'

    def test_special_characters_stripped(self):
        """Test FTS5 syntax characters are removed from tokens."""
        variants = build_search_query("data: (controller) {x} ^y")

        assert variants.primary == '"data"* "controller"* "x"* "y"*'

    def test_hyphen_and_underscore_kept(self):
        """Test hyphens and underscores survive sanitising."""
        assert sanitise_token("cross-border") == "cross-border"
        assert sanitise_token("data_subject") == "data_subject"

    def test_hyphenated_tokens_quoted(self):
        """Test hyphenated words stay inside phrases in both variants."""
        variants = build_search_query("cross-border transfer")

        assert variants.primary == '"cross-border"* "transfer"*'
        assert variants.fallback == '"cross-border"* OR "transfer"*'

    def test_tokens_without_letters_dropped(self):
        """Test tokens left with only hyphens or underscores are dropped."""
        variants = build_search_query("- data _ --")

        assert variants.primary == '"data"*'
        assert variants.fallback == '"data"*'

    def test_thai_text_kept(self):
        """Test Thai words keep their vowel and tone marks."""
        word = "ข้อมูลส่วนบุคคล"
        assert sanitise_token(word) == word

        variants = build_search_query(f"{word} ยินยอม")
        assert variants.primary == f'"{word}"* "ยินยอม"*'

    def test_only_punctuation(self):
        """Test queries with nothing searchable become the empty phrase."""
        variants = build_search_query("(( ::: ))")

        assert variants.primary == EMPTY_PHRASE
        assert variants.fallback is None


class TestExplicitSyntax:
    """Test queries that already use FTS5 operators."""

    @pytest.mark.parametrize(
        "query",
        [
            '"personal data"',
            "personal AND data",
            "consent OR approval",
            "data NOT deceased",
            "protect*",
        ],
    )
    def test_passed_through(self, query):
        """Test operators are preserved and no fallback is produced."""
        variants = build_search_query(query)

        assert variants.primary == query
        assert variants.fallback is None

    def test_lowercase_operators_are_words(self):
        """Test operator detection is case-sensitive."""
        variants = build_search_query("personal and data")

        assert variants.fallback == '"personal"* OR "and"* OR "data"*'

    def test_smart_quotes_normalised(self):
        """Test curly quotes become straight quotes."""
        variants = build_search_query("“personal data”")

        assert variants.primary == '"personal data"'

    def test_unbalanced_quote_closed(self):
        """Test an odd number of quotes is balanced."""
        variants = build_search_query('"personal data')

        assert variants.primary == '"personal data"'

    def test_sql_fragments_removed(self):
        """Test semicolons and comment markers are stripped."""
        variants = build_search_query("data AND consent; DROP TABLE x -- y")

        assert ";" not in variants.primary
        assert "--" not in variants.primary


class TestLimits:
    """Test empty and oversized input."""

    @pytest.mark.parametrize("query", ["", "   ", None])
    def test_empty(self, query):
        """Test empty input yields the empty phrase."""
        variants = build_search_query(query)

        assert variants.primary == EMPTY_PHRASE
        assert variants.fallback is None

    def test_truncated(self):
        """Test input is cut to the maximum length before tokenising."""
        variants = build_search_query("a" * (MAX_QUERY_LENGTH + 500))

        assert variants.primary == f'"{"a" * MAX_QUERY_LENGTH}"*'


class TestAgainstIndex:
    """Test built queries are accepted by SQLite FTS5."""

    @pytest.mark.parametrize(
        "query",
        [
            "personal data",
            '"unbalanced',
            "“smart quotes”",
            "data: (controller)",
            "ข้อมูลส่วนบุคคล",
            "cross-border",
            "-",
            "a-",
            "personal-data zzzunknown",
        ],
    )
    def test_no_syntax_error(self, sql_store, query):
        """Test every variant runs without an FTS5 error."""
        variants = build_search_query(query)

        sql_store.search_provisions(variants.primary)
        if variants.fallback:
            sql_store.search_provisions(variants.fallback)

    def test_hyphenated_fallback_finds_hits(self, sql_store):
        """Test the fallback still runs when a hyphenated word misses."""
        variants = build_search_query("personal-data zzzunknown")

        assert sql_store.search_provisions(variants.primary) == []
        assert sql_store.search_provisions(variants.fallback)
