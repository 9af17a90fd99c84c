"""FTS5 query builder.

Sanitises user input so it cannot break FTS5 syntax (stray quotes,
parentheses, colons) while still honouring intentional operators
(AND, OR, NOT, "phrase", prefix*). Works for Thai and English text.
"""

import re

from thailaw.core.logging import get_logger
from thailaw.core.models import SearchQueryVariants

logger = get_logger(__name__)

# Maximum query length to prevent abuse
MAX_QUERY_LENGTH = 1000

# Matches nothing and is always valid FTS5
EMPTY_PHRASE = '""'

EXPLICIT_FTS_SYNTAX = re.compile(r'["“”]|\bAND\b|\bOR\b|\bNOT\b|\*$')

SMART_QUOTES = re.compile(r"[“”]")

# Anything that is not a letter (any script), digit, underscore or hyphen.
# Thai vowel and tone marks are combining characters (category Mn) that
# \w does not cover, so they are listed explicitly.
_TOKEN_STRIP = re.compile(r"[^\w\-\u0e31\u0e34-\u0e3a\u0e47-\u0e4e]")

_HAS_WORD_CHAR = re.compile(r"[^\W_]")


def sanitise_token(token: str) -> str:
    """Strip characters with FTS5 meaning from a single token."""
    return _TOKEN_STRIP.sub("", token)


def build_search_query(query: str) -> SearchQueryVariants:
    """Build FTS5 query variants for a raw search string.

    Args:
        query: Raw user input

    Returns:
        SearchQueryVariants; ``fallback`` is set only in natural-language
        mode and should be run only when ``primary`` finds nothing
    """
    trimmed = (query or "").strip()[:MAX_QUERY_LENGTH]

    if not trimmed:
        return SearchQueryVariants(primary=EMPTY_PHRASE)

    # Explicit FTS5 syntax: keep the user's operators, defuse the rest
    if EXPLICIT_FTS_SYNTAX.search(trimmed):
        normalised = SMART_QUOTES.sub('"', trimmed)
        normalised = normalised.replace(";", "").replace("--", "")
        normalised = normalised[:MAX_QUERY_LENGTH]

        # Unmatched quotes make FTS5 fail with "unterminated string"
        if normalised.count('"') % 2 != 0:
            normalised += '"'

        logger.debug("fts_query_explicit", query=normalised)
        return SearchQueryVariants(primary=normalised)

    # Tokens without a letter or digit ("-", "_") index to nothing
    tokens = [sanitise_token(t) for t in trimmed.split()]
    tokens = [t for t in tokens if _HAS_WORD_CHAR.search(t)]

    if not tokens:
        return SearchQueryVariants(primary=EMPTY_PHRASE)

    primary = " ".join(f'"{t}"*' for t in tokens)
    fallback = " OR ".join(f'"{t}"*' for t in tokens)

    return SearchQueryVariants(primary=primary, fallback=fallback)
