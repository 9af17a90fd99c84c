"""Thai legal citation parser.

Turns a free-form citation string into a StructuredCitation. The string
is tried against each grammar in ``CITATION_GRAMMARS`` in priority order;
malformed text yields ``valid=False`` rather than an exception.
"""

import re
from typing import Optional

from thailaw.core.logging import get_logger
from thailaw.core.models import CitationKind, StructuredCitation
from .abbreviations import expand_title
from .calendar import split_year, to_western
from .patterns import (
    ROYAL_DECREE_MARKERS,
    THAI_DIGITS,
    CitationGrammar,
    YearMode,
    match_grammar,
    split_pinpoint,
)

logger = get_logger(__name__)


def parse_citation(citation: str) -> StructuredCitation:
    """Parse a Thai legal citation.

    Args:
        citation: Citation text in any supported format

    Returns:
        StructuredCitation; ``valid`` is False when no grammar matches
    """
    trimmed = (citation or "").strip().translate(THAI_DIGITS)

    if not trimmed:
        return StructuredCitation.invalid("Empty citation")

    found = match_grammar(trimmed)
    if found is None:
        logger.debug("citation_unparsed", citation=trimmed)
        return StructuredCitation.invalid(f'Could not parse Thai citation: "{trimmed}"')

    grammar, match = found
    logger.debug("citation_matched", grammar=grammar.name)

    return _build_citation(grammar, match)


def _build_citation(grammar: CitationGrammar, match: re.Match) -> StructuredCitation:
    """Assemble a StructuredCitation from a grammar match."""
    raw_title = match.group("title").strip()

    era_year: Optional[int] = None
    western_year: Optional[int] = None

    if grammar.year_mode == YearMode.ERA:
        era_year = int(match.group("year"))
        western_year = to_western(era_year)
    elif grammar.year_mode == YearMode.AMBIGUOUS:
        era_year, western_year = split_year(int(match.group("year")))

    if grammar.year_mode == YearMode.NONE:
        # Bare identifiers are resolved against the store, not expanded
        title = raw_title.lower()
        abbreviation = None
    else:
        title, abbreviation = expand_title(raw_title)

    pinpoint = split_pinpoint(match.group("pinpoint"))

    return StructuredCitation(
        valid=True,
        kind=_classify(raw_title),
        title=title,
        abbreviation=abbreviation,
        era_year=era_year,
        western_year=western_year,
        section=pinpoint.section,
        subsection=pinpoint.subsection,
        paragraph=pinpoint.paragraph,
    )


def _classify(title: str) -> CitationKind:
    if ROYAL_DECREE_MARKERS.search(title):
        return CitationKind.ROYAL_DECREE
    return CitationKind.STATUTE
