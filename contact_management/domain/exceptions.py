"""
Domain Exceptions
=================

Typed errors raised by validators and repositories.

Only the HTTP layer translates these into response codes:

- ValidationError      -> 400
- AuthenticationError  -> 401
- NotFoundError        -> 404
- StoreError           -> 500 (sanitized)
- UnexpectedError      -> 500 (sanitized)
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ValidationFailure:
    """A single field-level validation failure."""
    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


class ContactManagementError(Exception):
    """Base exception for all contact management errors."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.replace("Error", "").lower()
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        result: Dict[str, Any] = {
            "error": self.message,
            "code": self.code,
        }
        if self.details:
            result["details"] = self.details
        return result


class ValidationError(ContactManagementError):
    """Raised when an entity or request fails field validation."""

    def __init__(self, failures: List[ValidationFailure]):
        super().__init__("Validation failed", code="validation_failed")
        self.failures = list(failures)

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["errors"] = [failure.to_dict() for failure in self.failures]
        return result


class NotFoundError(ContactManagementError):
    """Raised when a referenced primary or foreign key does not exist."""

    def __init__(self, entity: str, entity_id: Any):
        super().__init__(
            f"{entity} with ID {entity_id} not found.",
            code="not_found",
            details={"entity": entity, "id": entity_id},
        )
        self.entity = entity
        self.entity_id = entity_id


class StoreError(ContactManagementError):
    """Raised when the relational store rejects or fails an operation."""

    def __init__(self, message: str = "Database operation failed", original_exception: Optional[Exception] = None):
        super().__init__(message, code="store_error")
        self.original_exception = original_exception


class AuthenticationError(ContactManagementError):
    """Raised when credentials or a bearer token are rejected."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, code="unauthorized")


class UnexpectedError(ContactManagementError):
    """Anything that does not fit the categories above."""

    def __init__(self, message: str = "An unexpected error occurred"):
        super().__init__(message, code="unexpected_error")
