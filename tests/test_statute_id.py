"""Tests for statute identifier resolution."""

import pytest

from thailaw.citations.statute_id import (
    is_valid_statute_id,
    require_statute_id,
    resolve_statute_id,
    statute_id_candidates,
)
from thailaw.core.exceptions import NotFoundError, StatuteNotFoundError


class TestCandidates:
    """Test identifier spelling variants."""

    def test_lowercase_first(self):
        """Test the lowercased form is tried first."""
        assert statute_id_candidates("PDPA-BE2562")[0] == "pdpa-be2562"

    def test_dash_and_space_variants(self):
        """Test dashes and spaces are swapped."""
        assert "pdpa be2562" in statute_id_candidates("pdpa-be2562")
        assert "pdpa-be2562" in statute_id_candidates("pdpa be2562")

    def test_no_duplicates(self):
        """Test variants are unique."""
        candidates = statute_id_candidates("pdpa-be2562")
        assert len(candidates) == len(set(candidates))

    def test_blank_is_invalid(self):
        """Test blank identifiers are rejected."""
        assert not is_valid_statute_id("")
        assert not is_valid_statute_id("   ")
        assert is_valid_statute_id("pdpa-be2562")


class TestResolveStatuteId:
    """Test staged resolution against the store."""

    def test_exact_id(self, fake_store):
        """Test exact canonical id."""
        assert resolve_statute_id(fake_store, "pdpa-be2562") == "pdpa-be2562"

    def test_id_case_insensitive(self, fake_store):
        """Test ids are matched regardless of case and padding."""
        assert resolve_statute_id(fake_store, "  CSA-BE2562 ") == "csa-be2562"

    def test_english_title(self, fake_store):
        """Test English title substring."""
        assert resolve_statute_id(fake_store, "Computer Crime Act") == "cca-be2550"

    def test_thai_title(self, fake_store):
        """Test Thai title substring."""
        assert resolve_statute_id(fake_store, "ธุรกรรมทางอิเล็กทรอนิกส์") == "eta-be2544"

    def test_short_name(self, fake_store):
        """Test short name substring."""
        assert resolve_statute_id(fake_store, "PDPA 2019") == "pdpa-be2562"

    def test_unknown(self, fake_store):
        """Test unmatched input resolves to None."""
        assert resolve_statute_id(fake_store, "Nonexistent Act") is None

    @pytest.mark.parametrize("value", ["", "   "])
    def test_blank(self, fake_store, value):
        """Test blank input resolves to None without lookups."""
        assert resolve_statute_id(fake_store, value) is None

    def test_sql_store(self, sql_store):
        """Test the same stages against SQLite."""
        assert resolve_statute_id(sql_store, "PDPA-BE2562") == "pdpa-be2562"
        assert resolve_statute_id(sql_store, "Cybersecurity") == "csa-be2562"
        assert resolve_statute_id(sql_store, "ETA 2001") == "eta-be2544"
        assert resolve_statute_id(sql_store, "Nonexistent Act") is None

    def test_like_wildcards_are_literal(self, sql_store):
        """Test % and _ in input do not act as wildcards."""
        assert resolve_statute_id(sql_store, "%") is None
        assert resolve_statute_id(sql_store, "P_PA") is None


class TestRequireStatuteId:
    """Test the raising variant."""

    def test_found(self, fake_store):
        """Test a resolvable id is returned."""
        assert require_statute_id(fake_store, "cca-be2550") == "cca-be2550"

    def test_not_found(self, fake_store):
        """Test unmatched input raises with the original input."""
        with pytest.raises(StatuteNotFoundError) as exc_info:
            require_statute_id(fake_store, "Nonexistent Act")

        assert exc_info.value.identifier == "Nonexistent Act"
        assert exc_info.value.code == "STATUTE_NOT_FOUND"
        assert isinstance(exc_info.value, NotFoundError)
