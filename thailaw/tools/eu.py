"""EU cross-reference tools.

Thai statutes such as the PDPA were drafted with EU instruments in view.
These tools expose the recorded links in both directions and a simple
alignment check built on them.
"""

from collections import Counter
from typing import Optional

from thailaw.citations.statute_id import require_statute_id
from thailaw.citations.validator import REPEALED_WARNING
from thailaw.core.config import settings
from thailaw.core.exceptions import (
    InvalidInputError,
    ProvisionNotFoundError,
    StatuteNotFoundError,
)
from thailaw.core.logging import get_logger
from thailaw.core.models import (
    ComplianceStatus,
    DocumentStatus,
    EUDocumentType,
    EUReference,
    ImplementationStatus,
    LegalDocument,
    ToolResponse,
)
from thailaw.store.sql import SqlLegalStore
from .metadata import clamp_limit, generate_response_metadata
from .models import (
    EUBasisResult,
    EUBasisStatistics,
    EUComplianceResult,
    EUSearchResult,
    GetEUBasisInput,
    GetProvisionEUBasisInput,
    GetThaiImplementationsInput,
    ProvisionEUBasisResult,
    SearchEUImplementationsInput,
    ThaiImplementationsResult,
    ValidateEUComplianceInput,
)

logger = get_logger(__name__)

UNVERIFIED_WARNING = "Implementation status of the linked EU instruments has not been verified"


def _required(value: Optional[str], field: str) -> str:
    if not value or not value.strip():
        raise InvalidInputError(f"{field} is required")
    return value.strip()


def _statute(store: SqlLegalStore, document_id: str) -> LegalDocument:
    document_id = _required(document_id, "document_id")
    document = store.get_document(require_statute_id(store, document_id))
    if document is None:
        raise StatuteNotFoundError(document_id)
    return document


def get_eu_basis(
    store: SqlLegalStore,
    params: GetEUBasisInput,
) -> ToolResponse[EUBasisResult]:
    """List the EU directives and regulations a statute is linked to.

    Raises:
        InvalidInputError: document_id is blank
        StatuteNotFoundError: no statute matches document_id
    """
    document = _statute(store, params.document_id)
    reference_types = [rt.value for rt in params.reference_types] if params.reference_types else None

    eu_documents = store.eu_basis(document.id, reference_types=reference_types)
    if not params.include_articles:
        eu_documents = [d.model_copy(update={"articles": None}) for d in eu_documents]

    types = Counter(d.type for d in eu_documents)
    statistics = EUBasisStatistics(
        total_eu_references=len(eu_documents),
        directive_count=types[EUDocumentType.DIRECTIVE],
        regulation_count=types[EUDocumentType.REGULATION],
    )

    return ToolResponse(
        results=EUBasisResult(
            document_id=document.id,
            document_title=document.display_title,
            eu_documents=eu_documents,
            statistics=statistics,
        ),
        metadata=generate_response_metadata(store),
    )


def get_thai_implementations(
    store: SqlLegalStore,
    params: GetThaiImplementationsInput,
) -> ToolResponse[ThaiImplementationsResult]:
    """List the Thai statutes linked to an EU instrument.

    An unknown EU id is not an error: the list is simply empty.

    Raises:
        InvalidInputError: eu_document_id is blank
    """
    eu_document_id = _required(params.eu_document_id, "eu_document_id")
    eu_document = store.get_eu_document(eu_document_id)

    implementations = store.thai_implementations(
        eu_document_id,
        primary_only=params.primary_only,
        in_force_only=params.in_force_only,
    )

    return ToolResponse(
        results=ThaiImplementationsResult(
            eu_document_id=eu_document_id,
            eu_title=eu_document.title if eu_document else None,
            implementations=implementations,
            total=len(implementations),
        ),
        metadata=generate_response_metadata(store),
    )


def search_eu_implementations(
    store: SqlLegalStore,
    params: SearchEUImplementationsInput,
) -> ToolResponse[EUSearchResult]:
    """Search EU instruments by title, short name or CELEX number."""
    limit = clamp_limit(params.limit, settings.eu_search_default_limit, settings.eu_search_max_limit)
    query = params.query.strip() if params.query else None

    results = store.search_eu_documents(
        query=query or None,
        document_type=params.type.value if params.type else None,
        year_from=params.year_from,
        year_to=params.year_to,
        community=params.community,
        has_thai_implementation=params.has_thai_implementation,
        limit=limit,
    )
    logger.info("eu_search_completed", query=query, hits=len(results), limit=limit)

    return ToolResponse(
        results=EUSearchResult(results=results, total_results=len(results)),
        metadata=generate_response_metadata(store),
    )


def get_provision_eu_basis(
    store: SqlLegalStore,
    params: GetProvisionEUBasisInput,
) -> ToolResponse[ProvisionEUBasisResult]:
    """List the EU articles a single provision is linked to.

    Raises:
        InvalidInputError: document_id or provision_ref is blank
        StatuteNotFoundError: no statute matches document_id
        ProvisionNotFoundError: the statute has no such provision
    """
    provision_ref = _required(params.provision_ref, "provision_ref")
    document = _statute(store, params.document_id)

    provision = store.get_provision(document.id, provision_ref)
    provision_id = store.provision_row_id(document.id, provision_ref)
    if provision is None or provision_id is None:
        raise ProvisionNotFoundError(document.id, provision_ref)

    return ToolResponse(
        results=ProvisionEUBasisResult(
            document_id=document.id,
            provision_ref=provision.provision_ref,
            provision_content=provision.content,
            eu_references=store.list_eu_references(document.id, provision_id=provision_id),
        ),
        metadata=generate_response_metadata(store),
    )


def compliance_status(references: list[EUReference]) -> ComplianceStatus:
    """Fold recorded implementation statuses into one verdict.

    No links means the check does not apply; any complete link makes the
    statute compliant, any partial one makes it partial, and anything else
    is unclear.
    """
    if not references:
        return ComplianceStatus.NOT_APPLICABLE

    statuses = {ref.implementation_status for ref in references}
    if ImplementationStatus.COMPLETE in statuses:
        return ComplianceStatus.COMPLIANT
    if ImplementationStatus.PARTIAL in statuses:
        return ComplianceStatus.PARTIAL
    return ComplianceStatus.UNCLEAR


def validate_eu_compliance(
    store: SqlLegalStore,
    params: ValidateEUComplianceInput,
) -> ToolResponse[EUComplianceResult]:
    """Check a statute, or one of its provisions, against its EU links.

    Provision checks also count links recorded for the statute as a whole.

    Raises:
        InvalidInputError: document_id is blank
        StatuteNotFoundError: no statute matches document_id
        ProvisionNotFoundError: provision_ref names a provision the statute lacks
    """
    document = _statute(store, params.document_id)
    provision_ref = params.provision_ref.strip() if params.provision_ref else None
    eu_document_id = params.eu_document_id.strip() if params.eu_document_id else None

    warnings: list[str] = []
    if document.status == DocumentStatus.REPEALED:
        warnings.append(REPEALED_WARNING)

    provision_id: Optional[int] = None
    if provision_ref:
        provision_id = store.provision_row_id(document.id, provision_ref)
        if provision_id is None:
            raise ProvisionNotFoundError(document.id, provision_ref)

    if eu_document_id and store.get_eu_document(eu_document_id) is None:
        warnings.append(f'EU document "{eu_document_id}" not found in database')

    references = store.list_eu_references(
        document.id,
        provision_id=provision_id,
        include_document_level=True,
        eu_document_id=eu_document_id,
    )
    status = compliance_status(references)
    if status == ComplianceStatus.UNCLEAR:
        warnings.append(UNVERIFIED_WARNING)

    logger.info(
        "eu_compliance_checked",
        document_id=document.id,
        provision_ref=provision_ref,
        eu_document_id=eu_document_id,
        status=status.value,
        references=len(references),
    )

    return ToolResponse(
        results=EUComplianceResult(
            document_id=document.id,
            document_title=document.display_title,
            provision_ref=provision_ref,
            eu_document_id=eu_document_id,
            compliance_status=status,
            eu_references_found=len(references),
            eu_references=references,
            warnings=warnings,
        ),
        metadata=generate_response_metadata(store),
    )
