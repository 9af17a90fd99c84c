"""Thai statute identifier handling.

Thai statutes are identified by a slug derived from the act abbreviation
and Buddhist Era year, e.g. "pdpa-be2562". Users rarely type the slug, so
lookups fall back from exact id to title and short-name substrings.
"""

from typing import Optional

from thailaw.core.exceptions import StatuteNotFoundError
from thailaw.core.logging import get_logger
from thailaw.store.base import LegalStore

logger = get_logger(__name__)


def is_valid_statute_id(statute_id: str) -> bool:
    """Whether the identifier is non-blank."""
    return bool(statute_id) and bool(statute_id.strip())


def statute_id_candidates(statute_id: str) -> list[str]:
    """Spelling variants worth trying for an identifier.

    Examples:
        "PDPA-BE2562" -> ["pdpa-be2562", "PDPA-BE2562", "pdpa be2562"]
    """
    trimmed = statute_id.strip().lower()
    candidates = [trimmed, statute_id.strip()]

    if " " in trimmed:
        candidates.append("-".join(trimmed.split()))
    if "-" in trimmed:
        candidates.append(trimmed.replace("-", " "))

    # Preserve order, drop duplicates
    return list(dict.fromkeys(candidates))


def resolve_statute_id(store: LegalStore, statute_id: str) -> Optional[str]:
    """Map an identifier, title or short name to a canonical statute id.

    Stages, each tried only if the previous found nothing:
    1. Exact canonical id (see ``statute_id_candidates``)
    2. Substring of the Thai or English title
    3. Substring of the short name

    Args:
        store: Document store
        statute_id: User-supplied identifier or title fragment

    Returns:
        Canonical id, or None when nothing matches
    """
    if not is_valid_statute_id(statute_id):
        return None

    text = statute_id.strip()

    for candidate in statute_id_candidates(text):
        exact = store.get_document(candidate)
        if exact is not None:
            return exact.id

    by_title = store.find_document_by_title(text)
    if by_title is not None:
        logger.debug("statute_resolved_by_title", input=text, document_id=by_title.id)
        return by_title.id

    by_short = store.find_document_by_short_name(text)
    if by_short is not None:
        logger.debug("statute_resolved_by_short_name", input=text, document_id=by_short.id)
        return by_short.id

    logger.debug("statute_not_resolved", input=text)
    return None


def require_statute_id(store: LegalStore, statute_id: str) -> str:
    """Like ``resolve_statute_id`` but raises when nothing matches.

    Raises:
        StatuteNotFoundError: carrying the original input
    """
    resolved = resolve_statute_id(store, statute_id)
    if resolved is None:
        raise StatuteNotFoundError(statute_id)
    return resolved
