"""Book Pydantic schemas."""
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from library_catalog.models.book import Book
from library_catalog.schemas.common import BaseSchema, PaginatedResponse
from library_catalog.store.base import Page


class BookBase(BaseModel):
    """Base book schema."""

    title: str = Field(..., max_length=255)
    author: str = Field(..., max_length=255)
    isbn: str = Field(..., max_length=32)

    @field_validator("title", "author", "isbn")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v


class BookCreate(BookBase):
    """Schema for creating a book."""

    def to_entity(self) -> Book:
        return Book(title=self.title, author=self.author, isbn=self.isbn)


class BookUpdate(BookBase):
    """Schema for replacing a book's fields."""

    def to_entity(self, book_id: int) -> Book:
        return Book(id=book_id, title=self.title, author=self.author, isbn=self.isbn)


class BookResponse(BookBase, BaseSchema):
    """Schema for book response."""

    id: int


class BookFilter(BaseModel):
    """Query-string filter; every populated field must match as a substring."""

    title: Optional[str] = None
    author: Optional[str] = None
    isbn: Optional[str] = None

    def to_example(self) -> Book:
        return Book(title=self.title, author=self.author, isbn=self.isbn)


def page_to_response(page: Page[Book]) -> PaginatedResponse[BookResponse]:
    """Map a store page onto the wire format."""
    return PaginatedResponse[BookResponse](
        items=[BookResponse.model_validate(book) for book in page.items],
        total=page.total,
        page=page.page,
        page_size=page.size,
        total_pages=page.total_pages,
    )
