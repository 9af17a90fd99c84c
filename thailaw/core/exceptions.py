"""Custom exception classes for Thai Law Lite.

Malformed citation text is never an exception; these cover caller-input
faults and lookups that a caller explicitly requires to succeed.
"""

from typing import Any, Optional


class ThaiLawError(Exception):
    """Base exception with a structured error payload."""

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }


class NotFoundError(ThaiLawError):
    """Resource not found exception."""

    def __init__(
        self,
        resource: str,
        resource_id: str,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            code=f"{resource.upper()}_NOT_FOUND",
            message=f'{resource} "{resource_id}" not found',
            details=details,
        )
        self.resource_id = resource_id


class StatuteNotFoundError(NotFoundError):
    """No statute matches the supplied identifier or title."""

    def __init__(self, identifier: str) -> None:
        super().__init__(resource="Statute", resource_id=identifier)
        self.identifier = identifier


class ProvisionNotFoundError(NotFoundError):
    """A statute exists but has no provision with the given reference."""

    def __init__(self, document_id: str, provision_ref: str) -> None:
        super().__init__(
            resource="Provision",
            resource_id=provision_ref,
            details={"document_id": document_id},
        )
        self.document_id = document_id
        self.provision_ref = provision_ref


class InvalidInputError(ThaiLawError):
    """Caller supplied a missing or malformed required field."""

    def __init__(
        self,
        message: str = "Invalid input",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(code="INVALID_INPUT", message=message, details=details)


class InvalidAsOfDateError(InvalidInputError):
    """as_of_date is not an ISO calendar date."""

    def __init__(self, value: str) -> None:
        super().__init__(
            message="as_of_date must be an ISO date in YYYY-MM-DD format",
            details={"value": value},
        )


class SearchSyntaxError(InvalidInputError):
    """The full-text index rejected a query expression."""

    def __init__(self, query: str, reason: str) -> None:
        super().__init__(
            message=f"Search query could not be parsed: {reason}",
            details={"query": query},
        )
