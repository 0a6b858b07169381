"""
Domain Exceptions.

Custom exceptions for domain-level errors.
Every rule violation is raised synchronously where it is detected
(construction or PurchaseOrder.add_item); nothing is retried or recovered.
"""

from typing import Optional, Any, Dict


class DomainException(Exception):
    """Base exception for all domain errors."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or "DOMAIN_ERROR"
        self.details = details or {}


class ValidationException(DomainException):
    """Raised when a value is present but violates a domain rule."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            details={"field": field, "value": str(value) if value is not None else None}
        )
        self.field = field


class MissingArgumentException(ValidationException):
    """Raised when a required argument is absent (None)."""

    def __init__(self, field: str):
        super().__init__(f"{field} is required", field)
        self.code = "MISSING_ARGUMENT"
