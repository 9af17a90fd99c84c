"""Statute lookup tools: get_provision and check_currency."""

from typing import Optional, Union

from thailaw.citations.statute_id import resolve_statute_id
from thailaw.citations.validator import REPEALED_WARNING
from thailaw.core.config import settings
from thailaw.core.exceptions import InvalidInputError
from thailaw.core.logging import get_logger
from thailaw.core.models import DocumentStatus, LegalProvision, ToolResponse
from thailaw.store.sql import SqlLegalStore
from .metadata import generate_response_metadata, normalize_as_of_date
from .models import CheckCurrencyInput, CurrencyResult, GetProvisionInput, ProvisionListing

logger = get_logger(__name__)

ProvisionResults = Optional[Union[LegalProvision, list[LegalProvision], ProvisionListing]]


def _require_document_id(document_id: str) -> str:
    if not document_id or not document_id.strip():
        raise InvalidInputError("document_id is required")
    return document_id.strip()


def get_provision(
    store: SqlLegalStore,
    params: GetProvisionInput,
) -> ToolResponse[ProvisionResults]:
    """Retrieve one provision, or every provision of a statute.

    The document id goes through the statute resolver; unresolvable input
    is used as given. Whole-statute requests are capped at
    ``settings.max_all_provisions`` and come back as a ProvisionListing
    with ``truncated`` set when the cap was hit.

    Raises:
        InvalidInputError: document_id is blank
    """
    raw_id = _require_document_id(params.document_id)
    document_id = resolve_statute_id(store, raw_id) or raw_id

    reference = params.provision_ref or params.section
    metadata = generate_response_metadata(store)

    if not reference:
        cap = settings.max_all_provisions
        total = store.count_provisions(document_id)
        provisions = store.list_provisions(document_id, limit=cap)

        if total > cap:
            logger.info("provision_listing_truncated", document_id=document_id, total=total, cap=cap)
            return ToolResponse(
                results=ProvisionListing(provisions=provisions, truncated=True, total=total),
                metadata=metadata,
            )
        return ToolResponse(results=provisions, metadata=metadata)

    provision = store.get_provision(document_id, reference)
    if provision is None:
        logger.debug("provision_not_found", document_id=document_id, reference=reference)

    return ToolResponse(results=provision, metadata=metadata)


def check_currency(
    store: SqlLegalStore,
    params: CheckCurrencyInput,
) -> ToolResponse[Optional[CurrencyResult]]:
    """Report whether a statute is in force, optionally checking a provision.

    Raises:
        InvalidInputError: document_id is blank or as_of_date is malformed
    """
    raw_id = _require_document_id(params.document_id)
    normalize_as_of_date(params.as_of_date)

    resolved = resolve_statute_id(store, raw_id)
    document = store.get_document(resolved) if resolved else None

    if document is None:
        return ToolResponse(results=None, metadata=generate_response_metadata(store))

    warnings: list[str] = []
    if document.status == DocumentStatus.REPEALED:
        warnings.append(REPEALED_WARNING)

    provision_exists: Optional[bool] = None
    if params.provision_ref:
        provision_exists = store.provision_exists(
            document.id,
            provision_ref=params.provision_ref,
            section=params.provision_ref,
        )
        if not provision_exists:
            warnings.append(f'Provision "{params.provision_ref}" not found in this document')

    return ToolResponse(
        results=CurrencyResult(
            document_id=document.id,
            title=document.display_title,
            status=document.status,
            type=document.type.value,
            be_year=document.be_year,
            ce_year=document.ce_year,
            issued_date=document.issued_date,
            in_force_date=document.in_force_date,
            is_current=document.status == DocumentStatus.IN_FORCE,
            provision_exists=provision_exists,
            warnings=warnings,
        ),
        metadata=generate_response_metadata(store),
    )
