"""Book service tests."""
from unittest.mock import AsyncMock

import pytest

from library_catalog.core.exceptions import DuplicateIsbnError, MissingIdentifierError
from library_catalog.models.book import Book
from library_catalog.services.book_service import BookService
from library_catalog.store.base import Page, PageRequest
from library_catalog.store.memory_store import InMemoryBookStore


def make_book(**overrides) -> Book:
    fields = {"title": "Livro", "author": "Autor", "isbn": "001"}
    fields.update(overrides)
    return Book(**fields)


@pytest.fixture
def store() -> InMemoryBookStore:
    return InMemoryBookStore()


@pytest.fixture
def service(store) -> BookService:
    return BookService(store)


@pytest.fixture
def spy_store() -> AsyncMock:
    store = AsyncMock()
    store.exists_by_isbn.return_value = False
    return store


@pytest.mark.asyncio
async def test_create_assigns_id(service: BookService):
    """Test creating a book returns the stored record with an id."""
    created = await service.create(make_book())

    assert created.id is not None
    assert created.title == "Livro"
    assert created.author == "Autor"
    assert created.isbn == "001"


@pytest.mark.asyncio
async def test_create_then_find_by_id_round_trip(service: BookService):
    """Test a created book can be read back with the same fields."""
    created = await service.create(make_book())

    found = await service.find_by_id(created.id)

    assert found is not None
    assert (found.id, found.title, found.author, found.isbn) == (
        created.id, "Livro", "Autor", "001"
    )


@pytest.mark.asyncio
async def test_create_duplicate_isbn_leaves_store_unchanged(service: BookService):
    """Test a duplicate ISBN is rejected and nothing is written."""
    await service.create(make_book())

    with pytest.raises(DuplicateIsbnError) as exc_info:
        await service.create(make_book(title="Outro Livro"))

    assert exc_info.value.message == "Isbn already registered."
    page = await service.find(Book(isbn="001"), PageRequest(0, 100))
    assert page.total == 1
    assert page.items[0].title == "Livro"


@pytest.mark.asyncio
async def test_duplicate_isbn_never_calls_insert(spy_store: AsyncMock):
    """Test the existence check short-circuits before insert."""
    spy_store.exists_by_isbn.return_value = True
    service = BookService(spy_store)

    with pytest.raises(DuplicateIsbnError):
        await service.create(make_book())

    spy_store.exists_by_isbn.assert_awaited_once_with("001")
    spy_store.insert.assert_not_called()


@pytest.mark.asyncio
async def test_created_isbns_are_unique(service: BookService):
    """Test every successfully created book has a distinct ISBN."""
    for isbn in ["001", "002", "001", "003", "002"]:
        try:
            await service.create(make_book(isbn=isbn))
        except DuplicateIsbnError:
            pass

    page = await service.find(None, PageRequest(0, 100))
    isbns = [b.isbn for b in page.items]
    assert sorted(isbns) == ["001", "002", "003"]


@pytest.mark.parametrize("book", [None, Book()])
@pytest.mark.asyncio
async def test_update_requires_id(spy_store: AsyncMock, book):
    """Test update without an id fails before touching the store."""
    service = BookService(spy_store)

    with pytest.raises(MissingIdentifierError):
        await service.update(book)

    spy_store.update.assert_not_called()
    spy_store.insert.assert_not_called()


@pytest.mark.parametrize("book", [None, Book()])
@pytest.mark.asyncio
async def test_delete_requires_id(spy_store: AsyncMock, book):
    """Test delete without an id fails before touching the store."""
    service = BookService(spy_store)

    with pytest.raises(MissingIdentifierError):
        await service.delete(book)

    spy_store.delete.assert_not_called()


@pytest.mark.asyncio
async def test_update_replaces_fields(service: BookService):
    """Test update overwrites title, author and isbn."""
    created = await service.create(make_book())

    updated = await service.update(
        Book(id=created.id, title="Outro Livro", author="Outro Autor", isbn="002")
    )

    assert updated.id == created.id
    found = await service.find_by_id(created.id)
    assert (found.title, found.author, found.isbn) == ("Outro Livro", "Outro Autor", "002")


@pytest.mark.asyncio
async def test_update_does_not_check_isbn_itself(spy_store: AsyncMock):
    """Test update delegates straight to the store without an existence check."""
    spy_store.update.return_value = make_book(id=1)
    service = BookService(spy_store)

    result = await service.update(make_book(id=1))

    assert result.id == 1
    spy_store.exists_by_isbn.assert_not_called()
    spy_store.update.assert_awaited_once()


@pytest.mark.asyncio
async def test_delete_removes_book(service: BookService):
    """Test a deleted book can no longer be found."""
    created = await service.create(make_book())

    await service.delete(created)

    assert await service.find_by_id(created.id) is None


@pytest.mark.asyncio
async def test_find_by_id_missing_returns_none(service: BookService):
    """Test looking up an unknown id returns None instead of raising."""
    assert await service.find_by_id(999) is None


@pytest.mark.asyncio
async def test_find_is_case_insensitive_substring(service: BookService):
    """Test filter fields match as case-insensitive substrings."""
    await service.create(make_book())

    hit = await service.find(Book(title="livro"), PageRequest(0, 100))
    miss = await service.find(Book(title="zzz"), PageRequest(0, 100))

    assert [b.title for b in hit.items] == ["Livro"]
    assert miss.items == []
    assert miss.total == 0


@pytest.mark.asyncio
async def test_find_reports_page_metadata(service: BookService):
    """Test the returned page carries the request's index and size."""
    await service.create(make_book())

    page = await service.find(Book(title="Livro", author="Autor"), PageRequest(0, 100))

    assert page.total == 1
    assert page.page == 0
    assert page.size == 100
    assert page.total_pages == 1


@pytest.mark.asyncio
async def test_find_delegates_to_store(spy_store: AsyncMock):
    """Test find passes the example and page request through."""
    expected = Page(items=[], total=0, page=2, size=10)
    spy_store.find_page.return_value = expected
    service = BookService(spy_store)
    example = Book(author="x")
    request = PageRequest(2, 10)

    assert await service.find(example, request) is expected
    spy_store.find_page.assert_awaited_once_with(example, request)
