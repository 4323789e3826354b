"""Book model."""
from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from library_catalog.database import Base


class Book(Base):
    """A single catalog entry.

    The id is assigned by the store on insert. The ISBN column carries a
    unique constraint so the database rejects duplicates that slip past the
    service-level existence check.
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    isbn: Mapped[str] = mapped_column(String(32), unique=True, index=True, nullable=False)

    def copy(self, id: Optional[int] = None) -> "Book":
        """Return a detached copy, optionally with a different id."""
        return Book(
            id=self.id if id is None else id,
            title=self.title,
            author=self.author,
            isbn=self.isbn,
        )

    def __repr__(self) -> str:
        return f"<Book(id={self.id}, title={self.title}, isbn={self.isbn})>"
