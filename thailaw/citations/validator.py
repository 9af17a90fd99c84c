"""Citation verification against the document store.

Checks that a citation refers to a real statute and, when a section is
cited, a real provision of it. Problems are reported as warnings on the
result; nothing here raises for bad citation text.
"""

from typing import Optional

from thailaw.core.logging import get_logger
from thailaw.core.models import (
    DocumentStatus,
    LegalDocument,
    StructuredCitation,
    ValidationResult,
)
from thailaw.store.base import LegalStore
from .parser import parse_citation
from .statute_id import resolve_statute_id

logger = get_logger(__name__)

EMPTY_CITATION_WARNING = "Empty citation"
REPEALED_WARNING = "This statute has been repealed"


class CitationValidator:
    """Verify citations against a LegalStore.

    Checks:
    1. Does the citation parse?
    2. Does the statute exist (title/short name, constrained by year)?
    3. Is the statute repealed?
    4. Does the cited section exist?
    """

    def __init__(self, store: LegalStore):
        self.store = store

    def validate(self, citation: str) -> ValidationResult:
        """Validate a citation string.

        Args:
            citation: Citation text in any supported format

        Returns:
            ValidationResult with existence flags and warnings
        """
        if not citation or not citation.strip():
            return ValidationResult(
                citation=StructuredCitation.invalid(EMPTY_CITATION_WARNING),
                warnings=[EMPTY_CITATION_WARNING],
            )

        parsed = parse_citation(citation)

        if not parsed.valid:
            return ValidationResult(
                citation=parsed,
                warnings=[parsed.error or "Invalid citation format"],
            )

        title = parsed.title or ""
        document = self._find_document(parsed)

        if document is None:
            logger.info("citation_document_missing", title=title, era_year=parsed.era_year)
            return ValidationResult(
                citation=parsed,
                warnings=[f'Document "{title}" not found in database'],
            )

        warnings: list[str] = []

        if document.status == DocumentStatus.REPEALED:
            warnings.append(REPEALED_WARNING)

        provision_exists = False
        if parsed.section:
            provision_exists = self._provision_exists(document, parsed)
            if not provision_exists:
                warnings.append(
                    f"Section {parsed.pinpoint} not found in {document.display_title}"
                )

        logger.debug(
            "citation_validated",
            document_id=document.id,
            section=parsed.section,
            provision_exists=provision_exists,
        )

        return ValidationResult(
            citation=parsed,
            document_exists=True,
            provision_exists=provision_exists,
            document_id=document.id,
            document_title=document.display_title,
            status=document.status.value,
            warnings=warnings,
        )

    def _find_document(self, parsed: StructuredCitation) -> Optional[LegalDocument]:
        """Look up the cited statute.

        Title/short-name substring first, year-constrained when a year was
        cited. Year-less citations (bare identifiers) fall back to the
        statute id resolver.
        """
        title = parsed.title or ""

        document = self.store.find_document(
            title,
            era_year=parsed.era_year,
            western_year=parsed.western_year,
        )
        if document is not None or parsed.has_year:
            return document

        resolved_id = resolve_statute_id(self.store, title)
        if resolved_id is None:
            return None
        return self.store.get_document(resolved_id)

    def _provision_exists(self, document: LegalDocument, parsed: StructuredCitation) -> bool:
        pinpoint = parsed.pinpoint
        allow_prefix = parsed.subsection is None and parsed.paragraph is None

        return self.store.provision_exists(
            document.id,
            provision_ref=f"s{pinpoint}",
            section=pinpoint,
            allow_prefix=allow_prefix,
        )


def validate_citation(store: LegalStore, citation: str) -> ValidationResult:
    """Convenience function to validate a citation.

    Args:
        store: Document store
        citation: Citation text

    Returns:
        ValidationResult
    """
    return CitationValidator(store).validate(citation)
