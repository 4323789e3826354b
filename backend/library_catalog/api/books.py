"""Book API routes."""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from library_catalog.api.deps import get_book_service
from library_catalog.config import settings
from library_catalog.core.exceptions import NotFoundError
from library_catalog.models.book import Book
from library_catalog.schemas.book import (
    BookCreate,
    BookFilter,
    BookResponse,
    BookUpdate,
    page_to_response,
)
from library_catalog.schemas.common import ErrorListResponse, PaginatedResponse
from library_catalog.services.book_service import BookService
from library_catalog.store.base import PageRequest

router = APIRouter(prefix="/books", tags=["Books"])


async def _get_or_404(service: BookService, book_id: int) -> Book:
    book = await service.find_by_id(book_id)
    if book is None:
        raise NotFoundError("Book", book_id)
    return book


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorListResponse}},
)
async def create_book(
    book_data: BookCreate,
    service: BookService = Depends(get_book_service),
) -> Book:
    """Create a new book."""
    return await service.create(book_data.to_entity())


@router.get("/{book_id}", response_model=BookResponse)
async def get_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> Book:
    """Get a specific book."""
    return await _get_or_404(service, book_id)


@router.put("/{book_id}", response_model=BookResponse)
async def update_book(
    book_id: int,
    book_data: BookUpdate,
    service: BookService = Depends(get_book_service),
) -> Book:
    """Replace a book's title, author and ISBN."""
    await _get_or_404(service, book_id)
    return await service.update(book_data.to_entity(book_id))


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> Response:
    """Delete a book."""
    book = await _get_or_404(service, book_id)
    await service.delete(book)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("", response_model=PaginatedResponse[BookResponse])
async def list_books(
    title: Optional[str] = None,
    author: Optional[str] = None,
    isbn: Optional[str] = None,
    page: int = Query(0, ge=0),
    size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    service: BookService = Depends(get_book_service),
) -> PaginatedResponse[BookResponse]:
    """List books, filtering by case-insensitive substrings of any given field."""
    example = BookFilter(title=title, author=author, isbn=isbn).to_example()
    result = await service.find(example, PageRequest(page=page, size=size))
    return page_to_response(result)
