"""In-memory book store."""
from threading import Lock
from typing import Dict, List, Optional

from library_catalog.core.exceptions import DuplicateIsbnError
from library_catalog.models.book import Book
from library_catalog.store.base import ExampleCriteria, Page, PageRequest


class IDGenerator:
    """
    Thread-safe monotonic integer ID generator.
    """
    def __init__(self, start: int = 1):
        self._lock = Lock()
        self._current = start - 1

    def next_id(self) -> int:
        """
        Returns the next unique integer ID.
        """
        with self._lock:
            self._current += 1
            return self._current


class InMemoryBookStore:
    """
    Dict-based book store keyed by id.

    Stores detached copies so callers never hold a reference to stored state.
    ISBN uniqueness is enforced here the same way the SQL unique constraint
    enforces it.
    """
    def __init__(self, id_gen: Optional[IDGenerator] = None):
        self._storage: Dict[int, Book] = {}
        self._id_gen = id_gen or IDGenerator()
        self._lock = Lock()

    def _isbn_taken(self, isbn: str, exclude_id: Optional[int] = None) -> bool:
        return any(
            b.isbn == isbn and b.id != exclude_id for b in self._storage.values()
        )

    async def exists_by_isbn(self, isbn: str) -> bool:
        return self._isbn_taken(isbn)

    async def insert(self, book: Book) -> Book:
        with self._lock:
            if self._isbn_taken(book.isbn):
                raise DuplicateIsbnError(book.isbn)
            stored = book.copy(id=self._id_gen.next_id())
            self._storage[stored.id] = stored
        return stored.copy()

    async def update(self, book: Book) -> Book:
        with self._lock:
            if self._isbn_taken(book.isbn, exclude_id=book.id):
                raise DuplicateIsbnError(book.isbn)
            stored = book.copy()
            self._storage[stored.id] = stored
        return stored.copy()

    async def find_by_id(self, book_id: int) -> Optional[Book]:
        stored = self._storage.get(book_id)
        return stored.copy() if stored is not None else None

    async def delete(self, book: Book) -> None:
        with self._lock:
            self._storage.pop(book.id, None)

    async def find_page(self, example: Optional[Book], request: PageRequest) -> Page[Book]:
        criteria = ExampleCriteria.from_example(example)
        matched: List[Book] = [
            b for _, b in sorted(self._storage.items()) if criteria.matches(b)
        ]
        items = [b.copy() for b in matched[request.offset:request.offset + request.size]]
        return Page.of(items, request, total=len(matched))
