"""SQLAlchemy models."""
from library_catalog.models.book import Book

__all__ = [
    "Book",
]
