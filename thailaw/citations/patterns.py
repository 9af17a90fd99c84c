"""Regex grammars for Thai legal citations.

Formats covered:
- มาตรา 3 พ.ร.บ.คุ้มครองข้อมูลส่วนบุคคล พ.ศ. 2562 (Thai)
- Section 3, Personal Data Protection Act B.E. 2562 (2019)
- Personal Data Protection Act B.E. 2562, s. 3
- s. 3, PDPA 2019
- pdpa-be2562, s. 3
- Section 3, Personal Data Protection Act 2019

The grammars overlap, so they are tried in list order and the first match
wins. More specific grammars come first.
"""

import re
from enum import Enum
from typing import NamedTuple, Optional


class YearMode(str, Enum):
    """How the captured year group is interpreted."""
    ERA = "era"              # Always B.E.
    AMBIGUOUS = "ambiguous"  # B.E. or C.E., decided by magnitude
    NONE = "none"            # Grammar has no year


class CitationGrammar(NamedTuple):
    """One citation format: named groups ``pinpoint``, ``title``, ``year``."""
    name: str
    pattern: re.Pattern
    year_mode: YearMode


class PinpointMatch(NamedTuple):
    """A pinpoint fragment split into its parts."""
    section: str
    subsection: Optional[str]
    paragraph: Optional[str]


# =============================================================================
# Building Blocks
# =============================================================================

# 3, 3/1, 3(1), 3(1)(a)
_PINPOINT = r"(?P<pinpoint>\d+(?:/\d+)?(?:\([0-9a-z]+\))*)"

# Section, s, s., มาตรา
_SECTION_MARKER = r"(?:Section|s\.?|มาตรา)"

# B.E., BE, B.E
_BE_MARKER = r"B\.?E\.?"

# B.E. or the Thai พ.ศ.
_ERA_MARKER = r"(?:B\.?E\.?|พ\.ศ\.)"

# Optional "(2019)" after a B.E. year; informational only
_PAREN_CE = r"(?:\s*\(\d{4}\))?"


# =============================================================================
# Citation Grammars (priority order)
# =============================================================================

CITATION_GRAMMARS: list[CitationGrammar] = [
    # 1. Thai full form
    # Example: "มาตรา 3 พ.ร.บ.คุ้มครองข้อมูลส่วนบุคคล พ.ศ. 2562"
    CitationGrammar(
        "thai_full",
        re.compile(
            r"^มาตรา\s+" + _PINPOINT +
            r"\s+(?P<title>.+?)"
            r"\s+พ\.ศ\.\s*(?P<year>\d{4})$"
        ),
        YearMode.ERA,
    ),

    # 2. English full form with B.E. year
    # Example: "Section 3, Personal Data Protection Act B.E. 2562 (2019)"
    CitationGrammar(
        "english_be",
        re.compile(
            r"^(?:Section|s\.?)\s+" + _PINPOINT +
            r"\s*,?\s+(?P<title>.+?)"
            r"\s+" + _BE_MARKER + r"\s*(?P<year>\d{4})" + _PAREN_CE + r"$",
            re.IGNORECASE,
        ),
        YearMode.ERA,
    ),

    # 3. Trailing pinpoint with B.E. year
    # Examples: "Personal Data Protection Act B.E. 2562, s. 3",
    #           "พ.ร.บ.คุ้มครองข้อมูลส่วนบุคคล พ.ศ. 2562 มาตรา 3"
    CitationGrammar(
        "trailing_be",
        re.compile(
            r"^(?P<title>.+?)"
            r"\s+" + _ERA_MARKER + r"\s*(?P<year>\d{4})" + _PAREN_CE +
            r"\s*,?\s*" + _SECTION_MARKER + r"\s*" + _PINPOINT + r"$",
            re.IGNORECASE,
        ),
        YearMode.ERA,
    ),

    # 4. Abbreviated form, year in either epoch
    # Example: "s. 3, PDPA 2019", "s. 3 PDPA 2562"
    CitationGrammar(
        "short",
        re.compile(
            r"^s\.?\s+" + _PINPOINT +
            r"\s*,?\s+(?P<title>.+?)"
            r"\s+(?P<year>\d{4})$",
            re.IGNORECASE,
        ),
        YearMode.AMBIGUOUS,
    ),

    # 5. Bare identifier, resolved against the store later
    # Example: "pdpa-be2562, s. 3"
    # The id must be separated from the marker and must not itself be a
    # section word, so "Sections 3" is not read as id "section".
    CitationGrammar(
        "identifier",
        re.compile(
            r"^(?!sections?\b)(?P<title>[a-z][a-z0-9-]+)"
            r"(?:\s*,\s*|\s+)" + _SECTION_MARKER + r"\s*" + _PINPOINT + r"$",
            re.IGNORECASE,
        ),
        YearMode.NONE,
    ),

    # 6. English full form with bare year
    # Example: "Section 3, Personal Data Protection Act 2019"
    CitationGrammar(
        "english_ce",
        re.compile(
            r"^(?:Section|s\.?)\s+" + _PINPOINT +
            r"\s*,?\s+(?P<title>.+?)"
            r"\s+(?P<year>\d{4})$",
            re.IGNORECASE,
        ),
        YearMode.AMBIGUOUS,
    ),

    # 7. Trailing pinpoint with bare year
    # Example: "Personal Data Protection Act 2019, s. 3"
    CitationGrammar(
        "trailing_ce",
        re.compile(
            r"^(?P<title>.+?)"
            r"\s+(?P<year>\d{4})"
            r"\s*,?\s*" + _SECTION_MARKER + r"\s*" + _PINPOINT + r"$",
            re.IGNORECASE,
        ),
        YearMode.AMBIGUOUS,
    ),
]


# Pinpoint sub-grammar: "3", "3/1", "3(1)", "3(a)", "3(1)(a)".
# The first parenthesised group is always the subsection.
SECTION_REF = re.compile(r"^(\d+(?:/\d+)?)(?:\(([0-9a-z]+)\))?(?:\(([0-9a-z]+)\))?$")

# Thai numerals are normalised to ASCII before matching
THAI_DIGITS = str.maketrans("๐๑๒๓๔๕๖๗๘๙", "0123456789")

# Titles that mark a royal decree rather than an act
ROYAL_DECREE_MARKERS = re.compile(r"royal\s+decree|พระราชกฤษฎีกา|พ\.ร\.ฎ\.", re.IGNORECASE)


def match_grammar(text: str) -> Optional[tuple[CitationGrammar, re.Match]]:
    """Return the first grammar matching ``text`` and its match, or None."""
    for grammar in CITATION_GRAMMARS:
        match = grammar.pattern.match(text)
        if match:
            return grammar, match
    return None


def split_pinpoint(fragment: str) -> PinpointMatch:
    """Split a pinpoint fragment into section, subsection and paragraph.

    A fragment outside the sub-grammar is kept whole as the section.
    """
    match = SECTION_REF.match(fragment)
    if not match:
        return PinpointMatch(section=fragment, subsection=None, paragraph=None)

    return PinpointMatch(
        section=match.group(1),
        subsection=match.group(2) or None,
        paragraph=match.group(3) or None,
    )
