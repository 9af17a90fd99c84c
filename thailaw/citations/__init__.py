"""Citation parsing, formatting, resolution and validation."""

from .calendar import BE_OFFSET, to_era, to_western
from .parser import parse_citation
from .formatter import format_citation
from .statute_id import resolve_statute_id, require_statute_id
from .validator import CitationValidator, validate_citation
from .abbreviations import ACT_ABBREVIATIONS, resolve_abbreviation

__all__ = [
    "BE_OFFSET",
    "to_era",
    "to_western",
    "parse_citation",
    "format_citation",
    "resolve_statute_id",
    "require_statute_id",
    "CitationValidator",
    "validate_citation",
    "ACT_ABBREVIATIONS",
    "resolve_abbreviation",
]
