"""Response metadata and shared helpers for tool responses."""

import re
from datetime import date, datetime, timezone
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from thailaw.core.config import settings
from thailaw.core.exceptions import InvalidAsOfDateError
from thailaw.core.logging import get_logger
from thailaw.core.models import ResponseMetadata
from thailaw.store.sql import SqlLegalStore

logger = get_logger(__name__)

FRESHNESS_UNKNOWN = "Database freshness unknown"

DISCLAIMER = (
    "This data is derived from the Office of the Council of State (krisdika.go.th). "
    "Verify against official Royal Gazette publications when legal certainty is required."
)

SOURCE_AUTHORITY = "Office of the Council of State (สำนักงานคณะกรรมการกฤษฎีกา)"

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_built_at(value: str) -> datetime:
    """Parse a ``built_at`` timestamp; naive values are taken as UTC."""
    parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def describe_freshness(built_at: datetime, now: Optional[datetime] = None) -> str:
    """Human-readable age of the database build."""
    now = now or datetime.now(timezone.utc)
    days_since = (now - built_at).days

    if days_since > settings.staleness_threshold_days:
        return f"WARNING: Database is {days_since} days old. Data may be outdated."
    return f"Database built {days_since} day(s) ago."


def generate_response_metadata(
    store: Optional[SqlLegalStore] = None,
    now: Optional[datetime] = None,
) -> ResponseMetadata:
    """Build the ``_metadata`` block attached to every tool response.

    Without a store (pure tools such as format_citation) freshness is
    reported as unknown.
    """
    freshness = FRESHNESS_UNKNOWN

    if store is not None:
        try:
            built_at = store.get_metadata("built_at")
            if built_at:
                freshness = describe_freshness(parse_built_at(built_at), now=now)
        except (SQLAlchemyError, ValueError) as e:
            logger.warning("metadata_freshness_unavailable", error=str(e))

    return ResponseMetadata(
        data_freshness=freshness,
        disclaimer=DISCLAIMER,
        source_authority=SOURCE_AUTHORITY,
    )


def normalize_as_of_date(value: Optional[str]) -> Optional[str]:
    """Validate an ``as_of_date`` argument.

    Args:
        value: Caller-supplied date string

    Returns:
        The trimmed date, or None when absent or blank

    Raises:
        InvalidAsOfDateError: not a real calendar date in YYYY-MM-DD form
    """
    if value is None:
        return None

    trimmed = value.strip()
    if not trimmed:
        return None

    if not ISO_DATE_PATTERN.match(trimmed):
        raise InvalidAsOfDateError(trimmed)

    try:
        date.fromisoformat(trimmed)
    except ValueError as e:
        raise InvalidAsOfDateError(trimmed) from e

    return trimmed


def clamp_limit(limit: Optional[int], default: int, maximum: int) -> int:
    """Apply the default and keep a result limit within 1..maximum."""
    if limit is None:
        limit = default
    return min(max(limit, 1), maximum)
