"""Full-text search query construction."""

from .fts_query import MAX_QUERY_LENGTH, build_search_query, sanitise_token

__all__ = ["MAX_QUERY_LENGTH", "build_search_query", "sanitise_token"]
