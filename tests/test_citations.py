"""Tests for citation parsing, formatting and abbreviations."""

import pytest

from thailaw.citations.abbreviations import (
    ACT_ABBREVIATIONS,
    expand_title,
    get_abbreviation,
    resolve_abbreviation,
    resolve_thai_title,
)
from thailaw.citations.formatter import format_citation
from thailaw.citations.parser import parse_citation
from thailaw.citations.patterns import CITATION_GRAMMARS, match_grammar, split_pinpoint
from thailaw.core.models import CitationFormat, CitationKind, StructuredCitation


class TestCitationGrammars:
    """Test which grammar claims each citation form."""

    @pytest.mark.parametrize(
        "text,grammar",
        [
            ("มาตรา 3 พ.ร.บ.คุ้มครองข้อมูลส่วนบุคคล พ.ศ. 2562", "thai_full"),
            ("Section 3, Personal Data Protection Act B.E. 2562 (2019)", "english_be"),
            ("Personal Data Protection Act B.E. 2562, s. 3", "trailing_be"),
            ("s. 3, PDPA 2019", "short"),
            ("pdpa-be2562, s. 3", "identifier"),
            ("Section 3, Personal Data Protection Act 2019", "english_ce"),
            ("Personal Data Protection Act 2019, s. 3", "trailing_ce"),
        ],
    )
    def test_grammar_selection(self, text, grammar):
        """Test the highest-priority matching grammar wins."""
        found = match_grammar(text)

        assert found is not None
        assert found[0].name == grammar

    def test_priority_order(self):
        """Test grammars are listed from most to least specific."""
        names = [g.name for g in CITATION_GRAMMARS]

        assert names == [
            "thai_full",
            "english_be",
            "trailing_be",
            "short",
            "identifier",
            "english_ce",
            "trailing_ce",
        ]

    def test_no_match(self):
        """Test free text matches no grammar."""
        assert match_grammar("some random text") is None


class TestSplitPinpoint:
    """Test pinpoint decomposition."""

    def test_bare_section(self):
        """Test a plain section number."""
        assert split_pinpoint("3") == ("3", None, None)

    def test_subsection_and_paragraph(self):
        """Test 3(1)(a) splits into three parts."""
        assert split_pinpoint("3(1)(a)") == ("3", "1", "a")

    def test_letter_subsection(self):
        """Test a single letter group is the subsection, not the paragraph."""
        assert split_pinpoint("3(a)") == ("3", "a", None)

    def test_slash_section(self):
        """Test inserted sections such as 3/1 stay whole."""
        assert split_pinpoint("3/1") == ("3/1", None, None)

    def test_unrecognised_fragment_kept_whole(self):
        """Test fragments outside the sub-grammar become the section."""
        assert split_pinpoint("3(1)(2)(3)") == ("3(1)(2)(3)", None, None)


class TestParseCitation:
    """Test citation parsing."""

    def test_english_be(self):
        """Test English citation with B.E. year."""
        result = parse_citation("Section 3, Personal Data Protection Act B.E. 2562")

        assert result.valid
        assert result.kind == CitationKind.STATUTE
        assert result.section == "3"
        assert result.title == "Personal Data Protection Act"
        assert result.era_year == 2562
        assert result.western_year == 2019

    def test_english_be_with_western_year(self):
        """Test the parenthesised C.E. year is accepted and ignored."""
        result = parse_citation("Section 3, Personal Data Protection Act B.E. 2562 (2019)")

        assert result.valid
        assert result.era_year == 2562
        assert result.western_year == 2019

    def test_short_form_western_year(self):
        """Test abbreviated citation with a C.E. year."""
        result = parse_citation("s. 3, PDPA 2019")

        assert result.valid
        assert result.section == "3"
        assert result.western_year == 2019
        assert result.era_year == 2562
        assert result.title == "Personal Data Protection Act"
        assert result.abbreviation == "PDPA"

    def test_short_form_era_year(self):
        """Test abbreviated citation with a B.E. year."""
        result = parse_citation("s. 5 CCA 2550")

        assert result.valid
        assert result.era_year == 2550
        assert result.western_year == 2007
        assert result.title == "Computer Crime Act"

    def test_trailing_section(self):
        """Test title-first citation with B.E. year."""
        result = parse_citation("Personal Data Protection Act B.E. 2562, s. 3")

        assert result.valid
        assert result.section == "3"
        assert result.era_year == 2562

    def test_thai_full(self):
        """Test Thai citation with พ.ศ. year."""
        result = parse_citation("มาตรา 3 พ.ร.บ.คุ้มครองข้อมูลส่วนบุคคล พ.ศ. 2562")

        assert result.valid
        assert result.section == "3"
        assert result.era_year == 2562
        assert result.western_year == 2019
        assert result.title == "Personal Data Protection Act"

    def test_thai_digits(self):
        """Test Thai numerals are read as ASCII digits."""
        result = parse_citation("มาตรา ๑๙ พ.ร.บ.คุ้มครองข้อมูลส่วนบุคคล พ.ศ. ๒๕๖๒")

        assert result.valid
        assert result.section == "19"
        assert result.era_year == 2562

    def test_unknown_thai_title_kept(self):
        """Test Thai titles without a known English name pass through."""
        result = parse_citation("มาตรา 4 พระราชบัญญัติลิขสิทธิ์ พ.ศ. 2521")

        assert result.valid
        assert result.title == "พระราชบัญญัติลิขสิทธิ์"
        assert result.western_year == 1978

    def test_identifier(self):
        """Test ID-based citation has no year and keeps the id as title."""
        result = parse_citation("pdpa-be2562, s. 3")

        assert result.valid
        assert result.section == "3"
        assert result.title == "pdpa-be2562"
        assert result.era_year is None
        assert result.western_year is None

    def test_identifier_lowercased(self):
        """Test identifiers are normalised to lowercase."""
        result = parse_citation("PDPA-BE2562 s. 3")

        assert result.valid
        assert result.title == "pdpa-be2562"

    def test_english_western_year(self):
        """Test English citation with a bare C.E. year."""
        result = parse_citation("Section 3, Personal Data Protection Act 2019")

        assert result.valid
        assert result.era_year == 2562
        assert result.western_year == 2019

    def test_trailing_western_year(self):
        """Test title-first citation with a bare year."""
        result = parse_citation("Electronic Transactions Act 2001, s. 2")

        assert result.valid
        assert result.section == "2"
        assert result.era_year == 2544

    def test_subsection(self):
        """Test section with subsection."""
        result = parse_citation("Section 3(1), Personal Data Protection Act B.E. 2562")

        assert result.valid
        assert result.section == "3"
        assert result.subsection == "1"
        assert result.paragraph is None

    def test_subsection_and_paragraph(self):
        """Test section with subsection and paragraph."""
        result = parse_citation("Section 26(1)(a), Personal Data Protection Act B.E. 2562")

        assert result.section == "26"
        assert result.subsection == "1"
        assert result.paragraph == "a"
        assert result.pinpoint == "26(1)(a)"

    def test_letter_subsection(self):
        """Test a lettered first group fills the subsection."""
        result = parse_citation("Section 3(a), Personal Data Protection Act B.E. 2562")

        assert result.section == "3"
        assert result.subsection == "a"
        assert result.paragraph is None
        assert result.pinpoint == "3(a)"

    def test_identifier_bare_abbreviation(self):
        """Test a bare abbreviation with a comma parses as an identifier."""
        result = parse_citation("PDPA, s. 19")

        assert result.valid
        assert result.title == "pdpa"
        assert result.section == "19"

    @pytest.mark.parametrize("text", ["Sections 3", "section s. 3", "pdpas3"])
    def test_section_word_not_identifier(self, text):
        """Test section words and run-together text are not identifiers."""
        assert not parse_citation(text).valid

    def test_royal_decree_kind(self):
        """Test royal decree titles are classified."""
        result = parse_citation("Section 4, Royal Decree on Electronic Transactions B.E. 2549")

        assert result.valid
        assert result.kind == CitationKind.ROYAL_DECREE

    def test_unparseable(self):
        """Test free text is invalid with an echoing diagnostic."""
        result = parse_citation("some random text")

        assert not result.valid
        assert result.kind == CitationKind.UNKNOWN
        assert "some random text" in result.error
        assert result.section is None
        assert result.title is None
        assert result.era_year is None

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_empty(self, text):
        """Test empty and whitespace-only input is invalid."""
        result = parse_citation(text)

        assert not result.valid
        assert result.error == "Empty citation"

    def test_surrounding_whitespace(self):
        """Test leading and trailing whitespace is ignored."""
        result = parse_citation("  s. 3, PDPA 2019  ")

        assert result.valid
        assert result.section == "3"

    def test_years_always_paired(self):
        """Test any parsed year is present in both epochs."""
        for text in [
            "Section 3, Personal Data Protection Act B.E. 2562",
            "s. 3, PDPA 2019",
            "Personal Data Protection Act 2019, s. 3",
            "มาตรา 3 พ.ร.บ.คุ้มครองข้อมูลส่วนบุคคล พ.ศ. 2562",
        ]:
            result = parse_citation(text)
            assert result.era_year - result.western_year == 543


class TestFormatCitation:
    """Test citation formatting."""

    @pytest.fixture
    def parsed(self) -> StructuredCitation:
        return StructuredCitation(
            valid=True,
            kind=CitationKind.STATUTE,
            title="Personal Data Protection Act",
            era_year=2562,
            western_year=2019,
            section="3",
        )

    def test_full_en(self, parsed):
        """Test English full form."""
        result = format_citation(parsed, CitationFormat.FULL_EN)
        assert result == "Section 3, Personal Data Protection Act B.E. 2562 (2019)"

    def test_full_th(self, parsed):
        """Test Thai full form."""
        result = format_citation(parsed, CitationFormat.FULL_TH)
        assert result == "มาตรา 3 Personal Data Protection Act พ.ศ. 2562"

    def test_short(self, parsed):
        """Test short form falls back to the title without an abbreviation."""
        result = format_citation(parsed, CitationFormat.SHORT)
        assert result == "s. 3, Personal Data Protection Act 2019"

    def test_short_uses_abbreviation(self, parsed):
        """Test short form prefers the abbreviation."""
        with_abbr = parsed.model_copy(update={"abbreviation": "PDPA"})
        assert format_citation(with_abbr, "short") == "s. 3, PDPA 2019"

    def test_pinpoint(self, parsed):
        """Test pinpoint form."""
        assert format_citation(parsed, CitationFormat.PINPOINT) == "s. 3"

    def test_pinpoint_with_subsection(self, parsed):
        """Test subsection and paragraph are appended."""
        with_sub = parsed.model_copy(update={"subsection": "1", "paragraph": "a"})
        assert format_citation(with_sub, "pinpoint") == "s. 3(1)(a)"

    def test_default_format(self, parsed):
        """Test the default format is full_en."""
        assert format_citation(parsed) == format_citation(parsed, CitationFormat.FULL_EN)

    def test_unknown_format(self, parsed):
        """Test unknown format names fall back to full_en."""
        assert format_citation(parsed, "bluebook") == format_citation(parsed, "full_en")

    def test_invalid_citation(self):
        """Test invalid citations format to an empty string."""
        invalid = StructuredCitation.invalid("Empty citation")

        for fmt in CitationFormat:
            assert format_citation(invalid, fmt) == ""

    def test_missing_section(self, parsed):
        """Test citations without a section format to an empty string."""
        no_section = parsed.model_copy(update={"section": None})
        assert format_citation(no_section) == ""

    def test_missing_year(self):
        """Test year-less citations still format without raising."""
        parsed = parse_citation("pdpa-be2562, s. 3")

        assert format_citation(parsed, "pinpoint") == "s. 3"
        assert format_citation(parsed, "full_en").startswith("Section 3, pdpa-be2562")


class TestFormatReparse:
    """Test formatting and re-parsing is stable."""

    @pytest.mark.parametrize(
        "text",
        [
            "Section 3, Personal Data Protection Act B.E. 2562",
            "s. 3, PDPA 2019",
            "Personal Data Protection Act 2019, s. 3",
            "มาตรา 3 พ.ร.บ.คุ้มครองข้อมูลส่วนบุคคล พ.ศ. 2562",
            "Section 14(1), Computer Crime Act B.E. 2550",
            "มาตรา 4 พระราชบัญญัติลิขสิทธิ์ พ.ศ. 2521",
        ],
    )
    @pytest.mark.parametrize("fmt", [CitationFormat.FULL_EN, CitationFormat.FULL_TH])
    def test_idempotent(self, text, fmt):
        """Test format(parse(format(parse(s)))) equals format(parse(s))."""
        once = format_citation(parse_citation(text), fmt)
        twice = format_citation(parse_citation(once), fmt)

        assert once
        assert twice == once

    def test_reparse_keeps_fields(self):
        """Test the reparsed citation carries the same section and years."""
        original = parse_citation("s. 3(2), PDPA 2019")
        reparsed = parse_citation(format_citation(original, CitationFormat.FULL_EN))

        assert reparsed.section == original.section
        assert reparsed.subsection == original.subsection
        assert reparsed.era_year == original.era_year
        assert reparsed.western_year == original.western_year


class TestAbbreviations:
    """Test act abbreviation resolution."""

    def test_pdpa_abbreviation(self):
        """Test PDPA resolves to the Personal Data Protection Act."""
        assert resolve_abbreviation("PDPA") == "Personal Data Protection Act"

    def test_case_insensitive(self):
        """Test case insensitive lookup."""
        assert resolve_abbreviation("cca") == "Computer Crime Act"

    def test_unknown_returns_original(self):
        """Test unknown abbreviation returns original."""
        assert resolve_abbreviation("Unknown Act XYZ") == "Unknown Act XYZ"

    def test_thai_short_title(self):
        """Test Thai short titles resolve by subject phrase."""
        assert resolve_thai_title("พ.ร.บ.การรักษาความมั่นคงปลอดภัยไซเบอร์") == "Cybersecurity Act"

    def test_get_abbreviation(self):
        """Test reverse lookup is upper-cased."""
        assert get_abbreviation("Electronic Transactions Act") == "ETA"
        assert get_abbreviation("Some Other Act") is None

    def test_expand_title_keeps_abbreviation(self):
        """Test expansion reports the abbreviation as written."""
        assert expand_title("PDPA") == ("Personal Data Protection Act", "PDPA")
        assert expand_title("Cybersecurity Act") == ("Cybersecurity Act", None)

    def test_all_abbreviations_lowercase(self):
        """Test abbreviation keys are stored lowercase."""
        assert all(key == key.lower() for key in ACT_ABBREVIATIONS)
