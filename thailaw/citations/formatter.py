"""Thai legal citation formatter.

Formats:
    full_th:   "มาตรา {section} {title} พ.ศ. {era_year}"
    full_en:   "Section {section}, {title} B.E. {era_year} ({western_year})"
    short:     "s. {section}, {abbreviation} {western_year}"
    pinpoint:  "s. {section}"
"""

from typing import Union

from thailaw.core.models import CitationFormat, StructuredCitation


def _text(value: object) -> str:
    return "" if value is None else str(value)


def format_citation(
    citation: StructuredCitation,
    fmt: Union[CitationFormat, str] = CitationFormat.FULL_EN,
) -> str:
    """Render a parsed citation in one of the standard forms.

    Never raises. Unknown formats use the ``full_en`` template.

    Args:
        citation: Parsed citation
        fmt: Output format name

    Returns:
        Formatted citation, or "" for invalid or section-less citations
    """
    if not citation.valid or not citation.section:
        return ""

    pinpoint = citation.pinpoint
    title = _text(citation.title)
    era_year = _text(citation.era_year)
    western_year = _text(citation.western_year)

    fmt_value = fmt.value if isinstance(fmt, CitationFormat) else str(fmt)

    if fmt_value == CitationFormat.FULL_TH.value:
        return f"มาตรา {pinpoint} {title} พ.ศ. {era_year}".strip()

    if fmt_value == CitationFormat.SHORT.value:
        short_title = citation.abbreviation or title
        return f"s. {pinpoint}, {short_title} {western_year}".strip()

    if fmt_value == CitationFormat.PINPOINT.value:
        return f"s. {pinpoint}"

    return f"Section {pinpoint}, {title} B.E. {era_year} ({western_year})".strip()
