"""Tool layer: each tool takes the store plus an input model and returns a
ToolResponse carrying ``_metadata``."""

from .citations import format_citation_tool, validate_citation_tool
from .eu import (
    get_eu_basis,
    get_provision_eu_basis,
    get_thai_implementations,
    search_eu_implementations,
    validate_eu_compliance,
)
from .metadata import generate_response_metadata, normalize_as_of_date
from .models import (
    BuildLegalStanceInput,
    CheckCurrencyInput,
    FormatCitationInput,
    GetEUBasisInput,
    GetProvisionEUBasisInput,
    GetProvisionInput,
    GetThaiImplementationsInput,
    SearchEUImplementationsInput,
    SearchLegislationInput,
    ValidateCitationInput,
    ValidateEUComplianceInput,
)
from .provisions import check_currency, get_provision
from .search import build_legal_stance, search_legislation
from .sources import about, list_sources

__all__ = [
    "search_legislation",
    "build_legal_stance",
    "get_provision",
    "check_currency",
    "validate_citation_tool",
    "format_citation_tool",
    "get_eu_basis",
    "get_thai_implementations",
    "search_eu_implementations",
    "get_provision_eu_basis",
    "validate_eu_compliance",
    "list_sources",
    "about",
    "generate_response_metadata",
    "normalize_as_of_date",
    "SearchLegislationInput",
    "BuildLegalStanceInput",
    "GetProvisionInput",
    "CheckCurrencyInput",
    "ValidateCitationInput",
    "FormatCitationInput",
    "GetEUBasisInput",
    "GetThaiImplementationsInput",
    "SearchEUImplementationsInput",
    "GetProvisionEUBasisInput",
    "ValidateEUComplianceInput",
]
