"""Record store contract and paging types.

The service layer depends only on the ``BookStore`` protocol, so the SQL
store and the in-memory store are interchangeable.
"""
import math
from dataclasses import dataclass, field
from typing import Generic, Optional, Protocol, TypeVar

from library_catalog.models.book import Book

T = TypeVar("T")

FILTER_FIELDS = ("title", "author", "isbn")


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page index and page size."""

    page: int = 0
    size: int = 20

    def __post_init__(self):
        if self.page < 0:
            raise ValueError("page index must not be negative")
        if self.size < 1:
            raise ValueError("page size must be at least 1")

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass
class Page(Generic[T]):
    """One slice of a filtered result set plus the total match count."""

    items: list[T]
    total: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.size) if self.size else 0

    @classmethod
    def of(cls, items: list[T], request: PageRequest, total: int) -> "Page[T]":
        return cls(items=items, total=total, page=request.page, size=request.size)


@dataclass
class ExampleCriteria:
    """Non-empty fields of an example book, lower-cased for matching."""

    terms: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_example(cls, example: Optional[Book]) -> "ExampleCriteria":
        terms = {}
        if example is not None:
            for name in FILTER_FIELDS:
                value = getattr(example, name, None)
                if value:
                    terms[name] = value.lower()
        return cls(terms=terms)

    def matches(self, book: Book) -> bool:
        """Case-insensitive substring match on every populated field."""
        for name, term in self.terms.items():
            value = getattr(book, name, None) or ""
            if term not in value.lower():
                return False
        return True


class BookStore(Protocol):
    """Durable keyed storage for book records."""

    async def exists_by_isbn(self, isbn: str) -> bool:
        ...

    async def insert(self, book: Book) -> Book:
        """Persist a new book and return it with its assigned id.

        Raises:
            DuplicateIsbnError: if the ISBN is already stored
        """
        ...

    async def update(self, book: Book) -> Book:
        """Overwrite the stored record that has ``book.id``."""
        ...

    async def find_by_id(self, book_id: int) -> Optional[Book]:
        ...

    async def delete(self, book: Book) -> None:
        ...

    async def find_page(self, example: Optional[Book], request: PageRequest) -> Page[Book]:
        """Return books matching every non-empty field of ``example``.

        Matching is a case-insensitive substring test; empty fields impose
        no constraint. Results are ordered by id.
        """
        ...
