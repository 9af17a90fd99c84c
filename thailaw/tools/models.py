"""Input and result models for the tool layer."""

from typing import Optional

from pydantic import BaseModel, Field

from thailaw.core.models import (
    CitationFormat,
    CitationKind,
    ComplianceStatus,
    DocumentStatus,
    EUBasisDocument,
    EUDocumentType,
    EUImplementationSummary,
    EUReference,
    LegalProvision,
    ProvisionHit,
    ReferenceType,
    ThaiImplementation,
)


# =============================================================================
# Inputs
# =============================================================================

class SearchLegislationInput(BaseModel):
    """Full-text search request."""
    query: str = ""
    document_id: Optional[str] = None
    status: Optional[DocumentStatus] = None
    as_of_date: Optional[str] = None
    limit: Optional[int] = Field(None, description="Clamped to 1..search_max_limit")


class GetProvisionInput(BaseModel):
    """Provision retrieval request; no section means the whole statute."""
    document_id: str
    section: Optional[str] = None
    provision_ref: Optional[str] = None


class ValidateCitationInput(BaseModel):
    citation: str = ""


class FormatCitationInput(BaseModel):
    citation: str = ""
    format: CitationFormat = CitationFormat.FULL_EN


class CheckCurrencyInput(BaseModel):
    """Currency check for a statute and optionally one of its provisions."""
    document_id: str
    provision_ref: Optional[str] = None
    as_of_date: Optional[str] = None


class BuildLegalStanceInput(BaseModel):
    """Provision aggregation for a legal question."""
    query: str = ""
    document_id: Optional[str] = None
    as_of_date: Optional[str] = None
    limit: Optional[int] = Field(None, description="Clamped to 1..stance_max_limit")


class GetEUBasisInput(BaseModel):
    """EU instruments behind a Thai statute."""
    document_id: str
    include_articles: bool = False
    reference_types: Optional[list[ReferenceType]] = None


class GetThaiImplementationsInput(BaseModel):
    """Thai statutes linked to an EU instrument."""
    eu_document_id: str
    primary_only: bool = False
    in_force_only: bool = False


class SearchEUImplementationsInput(BaseModel):
    """EU instrument search with Thai implementation counts."""
    query: Optional[str] = None
    type: Optional[EUDocumentType] = None
    year_from: Optional[int] = None
    year_to: Optional[int] = None
    community: Optional[str] = None
    has_thai_implementation: Optional[bool] = None
    limit: Optional[int] = Field(None, description="Clamped to 1..eu_search_max_limit")


class GetProvisionEUBasisInput(BaseModel):
    document_id: str
    provision_ref: str


class ValidateEUComplianceInput(BaseModel):
    """EU alignment check for a statute, optionally narrowed to a provision
    or to one EU instrument."""
    document_id: str
    provision_ref: Optional[str] = None
    eu_document_id: Optional[str] = None


# =============================================================================
# Results
# =============================================================================

class ProvisionListing(BaseModel):
    """Whole-statute listing cut off at the provision cap."""
    provisions: list[LegalProvision]
    truncated: bool
    total: int


class ValidateCitationResult(BaseModel):
    citation: str
    formatted_citation: str
    valid: bool
    document_exists: bool
    provision_exists: bool
    document_id: Optional[str] = None
    document_title: Optional[str] = None
    status: Optional[str] = None
    warnings: list[str] = Field(default_factory=list)


class FormatCitationResult(BaseModel):
    input: str
    formatted: str
    kind: CitationKind = CitationKind.UNKNOWN
    valid: bool
    error: Optional[str] = None


class CurrencyResult(BaseModel):
    document_id: str
    title: str
    status: DocumentStatus
    type: str
    be_year: Optional[int] = None
    ce_year: Optional[int] = None
    issued_date: Optional[str] = None
    in_force_date: Optional[str] = None
    is_current: bool
    provision_exists: Optional[bool] = None
    warnings: list[str] = Field(default_factory=list)


class LegalStanceResult(BaseModel):
    query: str
    provisions: list[ProvisionHit]
    total_citations: int


class SourceInfo(BaseModel):
    name: str
    authority: str
    url: str
    license: str
    coverage: str
    languages: list[str]


class DatabaseInfo(BaseModel):
    tier: str
    schema_version: str
    built_at: str
    document_count: int
    provision_count: int
    eu_document_count: int = 0


class ListSourcesResult(BaseModel):
    jurisdiction: str
    sources: list[SourceInfo]
    database: DatabaseInfo
    calendar_note: str
    limitations: list[str]


class ServerInfo(BaseModel):
    name: str
    package: str
    version: str


class DatasetInfo(BaseModel):
    fingerprint: str
    built: str
    jurisdiction: str
    content_basis: str
    counts: dict[str, int]


class ProvenanceInfo(BaseModel):
    sources: list[str]
    license: str
    authenticity_note: str


class SecurityInfo(BaseModel):
    access_model: str = "read-only"
    network_access: bool = False
    filesystem_access: bool = False
    arbitrary_code: bool = False


class AboutResult(BaseModel):
    server: ServerInfo
    dataset: DatasetInfo
    provenance: ProvenanceInfo
    security: SecurityInfo = Field(default_factory=SecurityInfo)


class EUBasisStatistics(BaseModel):
    total_eu_references: int
    directive_count: int
    regulation_count: int


class EUBasisResult(BaseModel):
    document_id: str
    document_title: str
    eu_documents: list[EUBasisDocument]
    statistics: EUBasisStatistics


class ThaiImplementationsResult(BaseModel):
    eu_document_id: str
    eu_title: Optional[str] = None
    implementations: list[ThaiImplementation]
    total: int


class EUSearchResult(BaseModel):
    results: list[EUImplementationSummary]
    total_results: int


class ProvisionEUBasisResult(BaseModel):
    document_id: str
    provision_ref: str
    provision_content: str
    eu_references: list[EUReference]


class EUComplianceResult(BaseModel):
    document_id: str
    document_title: str
    provision_ref: Optional[str] = None
    eu_document_id: Optional[str] = None
    compliance_status: ComplianceStatus
    eu_references_found: int
    eu_references: list[EUReference] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
