"""Business logic services."""
from library_catalog.services.book_service import BookService

__all__ = [
    "BookService",
]
