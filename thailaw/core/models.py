"""Pydantic models for Thai Law Lite.

All models are frozen: they are value objects built once per call.
"""

from enum import Enum
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Enums
# =============================================================================

class CitationKind(str, Enum):
    """Kind of instrument a citation refers to."""
    STATUTE = "statute"
    ROYAL_DECREE = "royal_decree"
    UNKNOWN = "unknown"


class CitationFormat(str, Enum):
    """Output templates supported by the citation formatter."""
    FULL_TH = "full_th"    # มาตรา 3 ... พ.ศ. 2562
    FULL_EN = "full_en"    # Section 3, ... B.E. 2562 (2019)
    SHORT = "short"        # s. 3, PDPA 2019
    PINPOINT = "pinpoint"  # s. 3


class DocumentType(str, Enum):
    """Type of legal instrument stored in the database."""
    STATUTE = "statute"
    ROYAL_DECREE = "royal_decree"
    MINISTERIAL_REGULATION = "ministerial_regulation"


class DocumentStatus(str, Enum):
    """Legislative status of a stored document."""
    IN_FORCE = "in_force"
    AMENDED = "amended"
    REPEALED = "repealed"
    NOT_YET_IN_FORCE = "not_yet_in_force"


class EUDocumentType(str, Enum):
    """Kind of EU instrument."""
    DIRECTIVE = "directive"
    REGULATION = "regulation"


class ReferenceType(str, Enum):
    """How a Thai statute or provision relates to an EU instrument."""
    IMPLEMENTS = "implements"
    SUPPLEMENTS = "supplements"
    APPLIES = "applies"
    REFERENCES = "references"
    COMPLIES_WITH = "complies_with"
    DEROGATES_FROM = "derogates_from"
    AMENDED_BY = "amended_by"
    REPEALED_BY = "repealed_by"
    CITES_ARTICLE = "cites_article"
    MODELED_ON = "modeled_on"


class ImplementationStatus(str, Enum):
    """How completely a Thai statute carries over an EU instrument."""
    COMPLETE = "complete"
    PARTIAL = "partial"
    PENDING = "pending"
    UNKNOWN = "unknown"


class ComplianceStatus(str, Enum):
    """Verdict of the EU alignment check."""
    COMPLIANT = "compliant"
    PARTIAL = "partial"
    UNCLEAR = "unclear"
    NOT_APPLICABLE = "not_applicable"


# =============================================================================
# Citation Models
# =============================================================================

class StructuredCitation(BaseModel):
    """A citation string decomposed into its parts.

    Invalid citations carry only ``error``; valid ones always have both
    years populated whenever a year was present in the text.
    """
    model_config = ConfigDict(frozen=True)

    valid: bool
    kind: CitationKind = CitationKind.UNKNOWN
    title: Optional[str] = Field(None, description="Title or bare identifier, as extracted")
    abbreviation: Optional[str] = Field(None, description="Short act name, e.g. 'PDPA'")
    era_year: Optional[int] = Field(None, description="Buddhist Era (B.E.) year")
    western_year: Optional[int] = Field(None, description="Common Era (C.E.) year")
    section: Optional[str] = None
    subsection: Optional[str] = None
    paragraph: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def invalid(cls, error: str) -> "StructuredCitation":
        """Build the all-empty result for unparseable input."""
        return cls(valid=False, kind=CitationKind.UNKNOWN, error=error)

    @property
    def pinpoint(self) -> str:
        """Section with subsection and paragraph appended, e.g. ``3(1)(a)``."""
        ref = self.section or ""
        if self.subsection:
            ref += f"({self.subsection})"
        if self.paragraph:
            ref += f"({self.paragraph})"
        return ref

    @property
    def has_year(self) -> bool:
        return self.era_year is not None or self.western_year is not None


class ValidationResult(BaseModel):
    """Outcome of checking a citation against the document store."""
    model_config = ConfigDict(frozen=True)

    citation: StructuredCitation
    document_exists: bool = False
    provision_exists: bool = False
    document_id: Optional[str] = None
    document_title: Optional[str] = None
    status: Optional[str] = None
    warnings: list[str] = Field(default_factory=list)

    @property
    def valid(self) -> bool:
        """True only when the citation parsed, the document exists and
        any requested section exists."""
        if not self.citation.valid or not self.document_exists:
            return False
        if self.citation.section:
            return self.provision_exists
        return True


class SearchQueryVariants(BaseModel):
    """Full-text query expressions for one search request."""
    model_config = ConfigDict(frozen=True)

    primary: str
    fallback: Optional[str] = None


# =============================================================================
# Store Models
# =============================================================================

class LegalDocument(BaseModel):
    """A statute row from the document store."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Canonical identifier, e.g. 'pdpa-be2562'")
    type: DocumentType = DocumentType.STATUTE
    title: str = Field(..., description="Thai title")
    title_en: Optional[str] = None
    short_name: Optional[str] = None
    status: DocumentStatus = DocumentStatus.IN_FORCE
    be_year: Optional[int] = None
    ce_year: Optional[int] = None
    issued_date: Optional[str] = None
    in_force_date: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None

    @property
    def display_title(self) -> str:
        return self.title_en or self.title


class LegalProvision(BaseModel):
    """A single provision (section) of a statute."""
    model_config = ConfigDict(frozen=True)

    document_id: str
    document_title: Optional[str] = None
    document_status: Optional[str] = None
    provision_ref: str = Field(..., description="Canonical reference, e.g. 's3' or 's3(1)'")
    chapter: Optional[str] = None
    section: str
    title: Optional[str] = None
    content: str


class ProvisionHit(BaseModel):
    """A full-text search hit with highlighted snippet."""
    model_config = ConfigDict(frozen=True)

    document_id: str
    document_title: Optional[str] = None
    provision_ref: str
    chapter: Optional[str] = None
    section: str
    title: Optional[str] = None
    snippet: str
    relevance: float


# =============================================================================
# EU Cross-Reference Models
# =============================================================================

class EUDocument(BaseModel):
    """An EU directive or regulation, id in "type:year/number" form."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="e.g. 'regulation:2016/679'")
    type: EUDocumentType
    year: int
    number: int
    community: Optional[str] = "EU"
    celex_number: Optional[str] = None
    title: Optional[str] = None
    short_name: Optional[str] = None
    url_eur_lex: Optional[str] = None
    description: Optional[str] = None


class EUBasisDocument(BaseModel):
    """An EU instrument a Thai statute is linked to, one row per instrument."""
    model_config = ConfigDict(frozen=True)

    id: str
    type: EUDocumentType
    year: int
    number: int
    community: Optional[str] = None
    celex_number: Optional[str] = None
    title: Optional[str] = None
    short_name: Optional[str] = None
    url_eur_lex: Optional[str] = None
    reference_type: ReferenceType
    is_primary_implementation: bool = False
    articles: Optional[list[str]] = None


class ThaiImplementation(BaseModel):
    """A Thai statute linked to an EU instrument."""
    model_config = ConfigDict(frozen=True)

    document_id: str
    title: str
    status: DocumentStatus
    reference_type: ReferenceType
    is_primary: bool = False


class EUImplementationSummary(BaseModel):
    """An EU instrument with the Thai statutes that reference it."""
    model_config = ConfigDict(frozen=True)

    eu_document: EUDocument
    thai_statute_count: int
    primary_implementations: list[str] = Field(default_factory=list)


class EUReference(BaseModel):
    """One link between a Thai statute or provision and an EU instrument."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="EU document id")
    type: EUDocumentType
    title: Optional[str] = None
    short_name: Optional[str] = None
    article: Optional[str] = None
    reference_type: ReferenceType
    full_citation: str
    context: Optional[str] = None
    is_primary_implementation: bool = False
    implementation_status: Optional[ImplementationStatus] = None
    source_type: str = "document"


# =============================================================================
# Tool Response Models
# =============================================================================

T = TypeVar("T")


class ResponseMetadata(BaseModel):
    """Provenance block attached to every tool response."""
    data_freshness: str
    disclaimer: str
    source_authority: str


class ToolResponse(BaseModel, Generic[T]):
    """Envelope returned by every tool."""
    results: T
    metadata: ResponseMetadata = Field(..., serialization_alias="_metadata")

    def to_payload(self) -> dict:
        """Serialize with the wire name ``_metadata``."""
        return self.model_dump(mode="json", by_alias=True)
