"""Core utilities."""
from library_catalog.core.exceptions import (
    AppException,
    BusinessRuleError,
    DuplicateIsbnError,
    MissingIdentifierError,
    NotFoundError,
)
from library_catalog.core.logging import get_logger, setup_logging

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Exceptions
    "AppException",
    "BusinessRuleError",
    "DuplicateIsbnError",
    "MissingIdentifierError",
    "NotFoundError",
]
