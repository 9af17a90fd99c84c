"""Tests for citation validation against the store."""

import pytest

from thailaw.citations.validator import (
    EMPTY_CITATION_WARNING,
    REPEALED_WARNING,
    CitationValidator,
    validate_citation,
)


@pytest.fixture(params=["fake_store", "sql_store"])
def store(request):
    """Run each validator test against the fake and the SQLite store."""
    return request.getfixturevalue(request.param)


class TestValidateCitation:
    """Test the validation verdict."""

    def test_known_citation(self, store):
        """Test a known PDPA citation validates cleanly."""
        result = validate_citation(store, "Section 3, Personal Data Protection Act B.E. 2562")

        assert result.document_exists
        assert result.provision_exists
        assert result.valid
        assert result.warnings == []
        assert result.document_id == "pdpa-be2562"
        assert result.document_title == "Personal Data Protection Act B.E. 2562 (2019)"
        assert result.status == "in_force"

    def test_thai_citation(self, store):
        """Test a Thai citation validates against the English-titled row."""
        result = validate_citation(store, "มาตรา 19 พ.ร.บ.คุ้มครองข้อมูลส่วนบุคคล พ.ศ. 2562")

        assert result.valid
        assert result.document_id == "pdpa-be2562"

    def test_abbreviated_citation(self, store):
        """Test abbreviation plus C.E. year."""
        result = validate_citation(store, "s. 5, CCA 2007")

        assert result.valid
        assert result.document_id == "cca-be2550"
        assert result.status == "amended"

    def test_identifier_citation(self, store):
        """Test a bare id without a year resolves through the id resolver."""
        result = validate_citation(store, "pdpa-be2562, s. 19")

        assert result.document_exists
        assert result.provision_exists
        assert result.document_id == "pdpa-be2562"

    def test_nonexistent_act(self, store):
        """Test an unknown act is reported as missing."""
        result = validate_citation(store, "Section 1, Fictional Act B.E. 2599")

        assert not result.document_exists
        assert not result.provision_exists
        assert not result.valid
        assert result.warnings == ['Document "Fictional Act" not found in database']

    def test_year_mismatch(self, store):
        """Test the year constrains the document match."""
        result = validate_citation(store, "Section 3, Personal Data Protection Act B.E. 2550")

        assert not result.document_exists

    def test_missing_section(self, store):
        """Test a missing section keeps the document but warns."""
        result = validate_citation(store, "Section 999, Personal Data Protection Act B.E. 2562")

        assert result.document_exists
        assert not result.provision_exists
        assert not result.valid
        assert len(result.warnings) > 0
        assert "Section 999 not found in Personal Data Protection Act B.E. 2562 (2019)" in result.warnings

    def test_section_prefix_match(self, store):
        """Test a bare section matches stored subsections."""
        result = validate_citation(store, "Section 14, Computer Crime Act B.E. 2550")

        assert result.provision_exists

    def test_subsection_exact_match(self, store):
        """Test an explicit subsection must exist exactly."""
        assert validate_citation(store, "Section 14(2), Computer Crime Act B.E. 2550").provision_exists
        assert not validate_citation(store, "Section 14(9), Computer Crime Act B.E. 2550").provision_exists

    def test_repealed_warning(self, store):
        """Test repealed statutes validate with a warning."""
        result = validate_citation(store, "Copyright Act B.E. 2521, s. 4")

        assert result.document_exists
        assert result.provision_exists
        assert result.status == "repealed"
        assert REPEALED_WARNING in result.warnings

    def test_unparseable(self, store):
        """Test unparseable text is invalid without raising."""
        result = validate_citation(store, "garbage text")

        assert not result.citation.valid
        assert not result.document_exists
        assert not result.provision_exists
        assert result.warnings == [result.citation.error]

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty(self, store, text):
        """Test empty citations short-circuit with a warning."""
        result = validate_citation(store, text)

        assert not result.citation.valid
        assert not result.document_exists
        assert result.warnings == [EMPTY_CITATION_WARNING]

    def test_provision_implies_document(self, store):
        """Test provision_exists is never true without document_exists."""
        for text in [
            "Section 3, Personal Data Protection Act B.E. 2562",
            "Section 1, Fictional Act B.E. 2599",
            "garbage text",
            "s. 2 ETA 2001",
        ]:
            result = validate_citation(store, text)
            assert result.document_exists or not result.provision_exists

    def test_validator_class(self, store):
        """Test the class and the convenience function agree."""
        text = "s. 3, CSA 2019"
        assert CitationValidator(store).validate(text) == validate_citation(store, text)
