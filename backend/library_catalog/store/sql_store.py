"""SQLAlchemy implementation of the book store."""
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from library_catalog.core.exceptions import DuplicateIsbnError
from library_catalog.core.logging import get_logger
from library_catalog.models.book import Book
from library_catalog.store.base import FILTER_FIELDS, Page, PageRequest

logger = get_logger("store.sql")


class SqlAlchemyBookStore:
    """Book store backed by an async SQLAlchemy session.

    Writes are flushed, not committed; the session owner (``get_db``)
    commits at the end of the request.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _flush_or_duplicate(self, isbn: str) -> None:
        # Rollback expires every loaded instance, so only plain values are used after it
        try:
            await self.db.flush()
        except IntegrityError as exc:
            await self.db.rollback()
            logger.warning(f"Unique constraint rejected isbn={isbn!r}: {exc.orig}")
            raise DuplicateIsbnError(isbn) from exc

    async def exists_by_isbn(self, isbn: str) -> bool:
        result = await self.db.execute(
            select(Book.id).where(Book.isbn == isbn).limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def insert(self, book: Book) -> Book:
        self.db.add(book)
        await self._flush_or_duplicate(book.isbn)
        await self.db.refresh(book)
        return book

    async def update(self, book: Book) -> Book:
        merged = await self.db.merge(book)
        await self._flush_or_duplicate(book.isbn)
        await self.db.refresh(merged)
        return merged

    async def find_by_id(self, book_id: int) -> Optional[Book]:
        return await self.db.get(Book, book_id)

    async def delete(self, book: Book) -> None:
        stored = await self.db.get(Book, book.id)
        if stored is not None:
            await self.db.delete(stored)
            await self.db.flush()

    async def find_page(self, example: Optional[Book], request: PageRequest) -> Page[Book]:
        query = select(Book)

        if example is not None:
            for name in FILTER_FIELDS:
                value = getattr(example, name, None)
                if value:
                    column = getattr(Book, name)
                    query = query.where(column.icontains(value, autoescape=True))

        # Get total count
        count_query = select(func.count()).select_from(query.subquery())
        total = (await self.db.execute(count_query)).scalar_one()

        # Get paginated results
        query = query.order_by(Book.id).offset(request.offset).limit(request.size)
        result = await self.db.execute(query)

        return Page.of(list(result.scalars().all()), request, total=total)
