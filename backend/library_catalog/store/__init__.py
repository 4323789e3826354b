"""Record stores for book persistence."""
from library_catalog.store.base import BookStore, Page, PageRequest
from library_catalog.store.memory_store import IDGenerator, InMemoryBookStore
from library_catalog.store.sql_store import SqlAlchemyBookStore

__all__ = [
    "BookStore",
    "Page",
    "PageRequest",
    "IDGenerator",
    "InMemoryBookStore",
    "SqlAlchemyBookStore",
]
