"""Full-text search tools: search_legislation and build_legal_stance."""

from typing import Optional

from thailaw.core.config import settings
from thailaw.core.exceptions import SearchSyntaxError
from thailaw.core.logging import get_logger
from thailaw.core.models import ProvisionHit, ToolResponse
from thailaw.search.fts_query import build_search_query
from thailaw.store.sql import SqlLegalStore
from .metadata import clamp_limit, generate_response_metadata, normalize_as_of_date
from .models import BuildLegalStanceInput, LegalStanceResult, SearchLegislationInput

logger = get_logger(__name__)


def run_search(
    store: SqlLegalStore,
    query: str,
    limit: int,
    document_id: Optional[str] = None,
    status: Optional[str] = None,
) -> list[ProvisionHit]:
    """Search with the primary query, then the fallback if nothing matched.

    Queries the index rejects count as "no hits".
    """
    variants = build_search_query(query)

    hits = _run_variant(store, variants.primary, limit, document_id, status)
    if hits or variants.fallback is None:
        return hits

    logger.debug("fts_fallback_used", query=query, fallback=variants.fallback)
    return _run_variant(store, variants.fallback, limit, document_id, status)


def _run_variant(
    store: SqlLegalStore,
    fts_query: str,
    limit: int,
    document_id: Optional[str],
    status: Optional[str],
) -> list[ProvisionHit]:
    try:
        return store.search_provisions(
            fts_query,
            document_id=document_id,
            status=status,
            limit=limit,
        )
    except SearchSyntaxError as e:
        logger.info("fts_query_rejected", query=fts_query, reason=e.message)
        return []


def search_legislation(
    store: SqlLegalStore,
    params: SearchLegislationInput,
) -> ToolResponse[list[ProvisionHit]]:
    """Full-text search across statute provisions.

    Raises:
        InvalidAsOfDateError: as_of_date is not YYYY-MM-DD
    """
    if not params.query or not params.query.strip():
        return ToolResponse(results=[], metadata=generate_response_metadata(store))

    normalize_as_of_date(params.as_of_date)
    limit = clamp_limit(params.limit, settings.search_default_limit, settings.search_max_limit)

    hits = run_search(
        store,
        params.query,
        limit,
        document_id=params.document_id,
        status=params.status.value if params.status else None,
    )

    logger.info("search_completed", query=params.query, hits=len(hits), limit=limit)

    return ToolResponse(results=hits, metadata=generate_response_metadata(store))


def build_legal_stance(
    store: SqlLegalStore,
    params: BuildLegalStanceInput,
) -> ToolResponse[LegalStanceResult]:
    """Aggregate the provisions most relevant to a legal question."""
    if not params.query or not params.query.strip():
        return ToolResponse(
            results=LegalStanceResult(query="", provisions=[], total_citations=0),
            metadata=generate_response_metadata(store),
        )

    normalize_as_of_date(params.as_of_date)
    limit = clamp_limit(params.limit, settings.stance_default_limit, settings.stance_max_limit)

    provisions = run_search(store, params.query, limit, document_id=params.document_id)

    return ToolResponse(
        results=LegalStanceResult(
            query=params.query,
            provisions=provisions,
            total_citations=len(provisions),
        ),
        metadata=generate_response_metadata(store),
    )
