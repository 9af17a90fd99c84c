"""Read-only capability interface over the document/provision store.

The citation resolver and validator only depend on this protocol, so they
run unchanged against ``SqlLegalStore`` or an in-memory fake.
"""

from typing import Optional, Protocol, runtime_checkable

from thailaw.core.models import LegalDocument


@runtime_checkable
class LegalStore(Protocol):
    """Lookups the citation subsystem needs from the store."""

    def get_document(self, document_id: str) -> Optional[LegalDocument]:
        """Exact match on canonical identifier."""
        ...

    def find_document_by_title(self, fragment: str) -> Optional[LegalDocument]:
        """First document whose Thai or English title contains ``fragment``."""
        ...

    def find_document_by_short_name(self, fragment: str) -> Optional[LegalDocument]:
        """First document whose short name contains ``fragment``."""
        ...

    def find_document(
        self,
        fragment: str,
        era_year: Optional[int] = None,
        western_year: Optional[int] = None,
    ) -> Optional[LegalDocument]:
        """First document whose Thai title, English title or short name
        contains ``fragment``.

        When a year is given the document must also match ``era_year`` on
        its B.E. year or ``western_year`` on its C.E. year.
        """
        ...

    def provision_exists(
        self,
        document_id: str,
        provision_ref: str,
        section: str,
        allow_prefix: bool = False,
    ) -> bool:
        """Whether the document has a provision with this reference.

        Matches ``provision_ref`` against the canonical reference or
        ``section`` against the bare section. With ``allow_prefix`` a stored
        reference that continues with a parenthesised subsection also
        matches, e.g. ``s3`` finds ``s3(1)``.
        """
        ...
