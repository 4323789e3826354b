"""Book service for managing the catalog lifecycle."""
from typing import Optional

from library_catalog.core.exceptions import DuplicateIsbnError, MissingIdentifierError
from library_catalog.core.logging import get_logger
from library_catalog.models.book import Book
from library_catalog.store.base import BookStore, Page, PageRequest

logger = get_logger("services.book")


class BookService:
    """Service for book operations."""

    def __init__(self, store: BookStore):
        self.store = store

    async def create(self, book: Book) -> Book:
        """Create a new book, rejecting an ISBN that is already registered."""
        if await self.store.exists_by_isbn(book.isbn):
            logger.warning(f"Rejected create: isbn {book.isbn!r} already registered")
            raise DuplicateIsbnError(book.isbn)

        created = await self.store.insert(book)
        logger.info(f"Created book id={created.id} isbn={created.isbn!r}")
        return created

    async def update(self, book: Optional[Book]) -> Book:
        """Replace title, author and isbn of an existing book.

        ISBN uniqueness is not re-checked here.
        """
        self._require_id(book)
        updated = await self.store.update(book)
        logger.info(f"Updated book id={updated.id}")
        return updated

    async def delete(self, book: Optional[Book]) -> None:
        """Delete an existing book."""
        self._require_id(book)
        await self.store.delete(book)
        logger.info(f"Deleted book id={book.id}")

    async def find_by_id(self, book_id: int) -> Optional[Book]:
        """Get a book by ID, or None."""
        return await self.store.find_by_id(book_id)

    async def find(self, example: Optional[Book], page_request: PageRequest) -> Page[Book]:
        """Get a page of books matching the example's populated fields."""
        return await self.store.find_page(example, page_request)

    @staticmethod
    def _require_id(book: Optional[Book]) -> None:
        if book is None or book.id is None:
            logger.warning("Rejected operation on a book without id")
            raise MissingIdentifierError()
