"""FastAPI dependencies for the book service."""
from typing import Optional

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from library_catalog.config import settings
from library_catalog.database import get_db
from library_catalog.services.book_service import BookService
from library_catalog.store.base import BookStore
from library_catalog.store.memory_store import InMemoryBookStore
from library_catalog.store.sql_store import SqlAlchemyBookStore

# Process-wide store used when DATABASE_URL=memory://
_memory_store: Optional[InMemoryBookStore] = None


def get_memory_store() -> InMemoryBookStore:
    """Provide a singleton in-memory store."""
    global _memory_store
    if _memory_store is None:
        _memory_store = InMemoryBookStore()
    return _memory_store


async def get_book_store(
    db: AsyncSession = Depends(get_db),
) -> BookStore:
    """Provide the configured book store for one request."""
    if settings.use_memory_store:
        return get_memory_store()
    return SqlAlchemyBookStore(db)


def get_book_service(store: BookStore = Depends(get_book_store)) -> BookService:
    """Dependency provider for BookService."""
    return BookService(store)


def reset_dependencies() -> None:
    """Drop the in-memory singleton. Useful for testing."""
    global _memory_store
    _memory_store = None
