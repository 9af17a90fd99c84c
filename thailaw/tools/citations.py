"""Citation tools: validate_citation_tool and format_citation_tool."""

import re

from thailaw.citations.abbreviations import get_abbreviation
from thailaw.citations.formatter import format_citation
from thailaw.citations.parser import parse_citation
from thailaw.citations.validator import EMPTY_CITATION_WARNING, validate_citation
from thailaw.core.models import StructuredCitation, ToolResponse, ValidationResult
from thailaw.store.sql import SqlLegalStore
from .metadata import generate_response_metadata
from .models import (
    FormatCitationInput,
    FormatCitationResult,
    ValidateCitationInput,
    ValidateCitationResult,
)

# " B.E. 2562 (2019)" or " พ.ศ. 2562" at the end of a stored title
TITLE_YEAR_SUFFIX = re.compile(r"\s+(?:B\.E\.|พ\.ศ\.)\s*\d{4}(?:\s*\(\d{4}\))?$")


def _display_citation(store: SqlLegalStore, result: ValidationResult) -> StructuredCitation:
    """Fill a year-less citation from the statute it resolved to.

    Bare identifiers such as "pdpa-be2562, s. 3" carry no title or year;
    the stored statute supplies both.
    """
    citation = result.citation
    if citation.has_year or not result.document_id:
        return citation

    document = store.get_document(result.document_id)
    if document is None:
        return citation

    title = TITLE_YEAR_SUFFIX.sub("", document.display_title)
    return citation.model_copy(
        update={
            "title": title,
            "abbreviation": get_abbreviation(title),
            "era_year": document.be_year,
            "western_year": document.ce_year,
        }
    )


def validate_citation_tool(
    store: SqlLegalStore,
    params: ValidateCitationInput,
) -> ToolResponse[ValidateCitationResult]:
    """Validate a citation against the database and add its canonical form."""
    if not params.citation or not params.citation.strip():
        return ToolResponse(
            results=ValidateCitationResult(
                citation=params.citation,
                formatted_citation="",
                valid=False,
                document_exists=False,
                provision_exists=False,
                warnings=[EMPTY_CITATION_WARNING],
            ),
            metadata=generate_response_metadata(store),
        )

    result = validate_citation(store, params.citation)

    return ToolResponse(
        results=ValidateCitationResult(
            citation=params.citation,
            formatted_citation=format_citation(_display_citation(store, result)),
            valid=result.valid,
            document_exists=result.document_exists,
            provision_exists=result.provision_exists,
            document_id=result.document_id,
            document_title=result.document_title,
            status=result.status,
            warnings=result.warnings,
        ),
        metadata=generate_response_metadata(store),
    )


def format_citation_tool(params: FormatCitationInput) -> ToolResponse[FormatCitationResult]:
    """Parse a citation and render it in the requested format.

    Unparseable input is echoed back unchanged together with the parse error.
    """
    if not params.citation or not params.citation.strip():
        return ToolResponse(
            results=FormatCitationResult(
                input="",
                formatted="",
                valid=False,
                error=EMPTY_CITATION_WARNING,
            ),
            metadata=generate_response_metadata(),
        )

    parsed = parse_citation(params.citation)

    if not parsed.valid:
        return ToolResponse(
            results=FormatCitationResult(
                input=params.citation,
                formatted=params.citation,
                valid=False,
                error=parsed.error,
            ),
            metadata=generate_response_metadata(),
        )

    return ToolResponse(
        results=FormatCitationResult(
            input=params.citation,
            formatted=format_citation(parsed, params.format),
            kind=parsed.kind,
            valid=True,
        ),
        metadata=generate_response_metadata(),
    )
