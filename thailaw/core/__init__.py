"""Core configuration, logging, errors and models."""

from .config import settings, get_settings
from .models import (
    CitationFormat,
    CitationKind,
    DocumentStatus,
    LegalDocument,
    LegalProvision,
    SearchQueryVariants,
    StructuredCitation,
    ToolResponse,
    ValidationResult,
)

__all__ = [
    "settings",
    "get_settings",
    "CitationFormat",
    "CitationKind",
    "DocumentStatus",
    "LegalDocument",
    "LegalProvision",
    "SearchQueryVariants",
    "StructuredCitation",
    "ToolResponse",
    "ValidationResult",
]
