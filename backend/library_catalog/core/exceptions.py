"""Custom exceptions for the application."""
from typing import Any, Optional


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class BusinessRuleError(AppException):
    """Domain rule violations, reported to clients as a one-message error list."""

    def __init__(self, message: str, error_code: str = "BUSINESS_RULE"):
        super().__init__(message, error_code=error_code)


class DuplicateIsbnError(BusinessRuleError):
    """A book with the same ISBN is already in the catalog."""

    MESSAGE = "Isbn already registered."

    def __init__(self, isbn: Optional[str] = None):
        super().__init__(self.MESSAGE, error_code="DUPLICATE_ISBN")
        if isbn is not None:
            self.details = {"isbn": isbn}


class MissingIdentifierError(AppException):
    """Update or delete was attempted on a book without an id."""

    def __init__(self, message: str = "Book id must not be null."):
        super().__init__(message, error_code="MISSING_IDENTIFIER")


class NotFoundError(AppException):
    """Resource not found errors."""

    def __init__(self, resource: str, resource_id: Any):
        super().__init__(
            f"{resource} with id {resource_id} not found",
            error_code="NOT_FOUND",
            details={"resource": resource, "id": resource_id},
        )

