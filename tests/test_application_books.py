"""
Tests for the books application layer (use cases).

Tests use cases with mocked ports. No real infrastructure needed.
Each test verifies orchestration logic and the returned Result.
"""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from app.application.books.create_book import CreateBookUseCase
from app.application.books.delete_book import DeleteBookUseCase
from app.application.books.dtos import (
    CreateBookCommand,
    ListBooksQuery,
    SearchBooksQuery,
    UpdateBookCommand,
)
from app.application.books.get_book import GetBookUseCase
from app.application.books.list_books import (
    INVALID_PAGING_MESSAGE,
    PAGE_OUT_OF_RANGE_MESSAGE,
    ListBooksUseCase,
)
from app.application.books.results import ErrorKind
from app.application.books.search_books import SearchBooksUseCase
from app.application.books.update_book import ID_MISMATCH_MESSAGE, UpdateBookUseCase
from app.domain.books.entities import Book
from app.domain.books.ports import BookRepository

STORED = Book(2, "Test Book 2", "Test Author 2", date(2021, 2, 2), Decimal("29.99"))


@pytest.fixture
def repo() -> MagicMock:
    return MagicMock(spec=BookRepository)


def _update(book_id: int = 2, payload_id: int | None = 2, **fields) -> UpdateBookCommand:
    values = {
        "title": "Updated",
        "author": "Someone",
        "publication_date": date(2000, 1, 1),
        "price": Decimal("5.00"),
    }
    values.update(fields)
    return UpdateBookCommand(book_id=book_id, payload_id=payload_id, **values)


class TestListBooksUseCase:
    """Tests for the ListBooksUseCase."""

    @pytest.mark.parametrize(("page", "page_size"), [(0, 10), (1, 0), (-1, -1)])
    def test_invalid_paging_rejected(self, repo, page, page_size) -> None:
        result = ListBooksUseCase(repo).execute(ListBooksQuery(page, page_size))
        assert result.error.kind is ErrorKind.INVALID_ARGUMENT
        assert result.error.message == INVALID_PAGING_MESSAGE
        repo.count.assert_not_called()

    def test_page_past_end_is_not_found(self, repo) -> None:
        repo.count.return_value = 3
        result = ListBooksUseCase(repo).execute(ListBooksQuery(page=2, page_size=3))
        assert result.error.kind is ErrorKind.NOT_FOUND
        assert result.error.message == PAGE_OUT_OF_RANGE_MESSAGE
        repo.list_range.assert_not_called()

    def test_slice_is_requested_at_offset(self, repo) -> None:
        repo.count.return_value = 25
        repo.list_range.return_value = [STORED]
        result = ListBooksUseCase(repo).execute(ListBooksQuery(page=3, page_size=10))
        assert result.ok
        assert result.value == [STORED]
        repo.list_range.assert_called_once_with(offset=20, limit=10)

    def test_empty_catalog_first_page_is_empty_list(self, repo) -> None:
        repo.count.return_value = 0
        result = ListBooksUseCase(repo).execute(ListBooksQuery())
        assert result.ok
        assert result.value == []

    def test_empty_catalog_later_page_is_not_found(self, repo) -> None:
        repo.count.return_value = 0
        result = ListBooksUseCase(repo).execute(ListBooksQuery(page=2))
        assert result.error.kind is ErrorKind.NOT_FOUND

    def test_empty_catalog_strict_mode(self, repo) -> None:
        repo.count.return_value = 0
        use_case = ListBooksUseCase(repo, allow_empty_first_page=False)
        result = use_case.execute(ListBooksQuery())
        assert result.error.kind is ErrorKind.NOT_FOUND


class TestGetBookUseCase:
    """Tests for the GetBookUseCase."""

    def test_found(self, repo) -> None:
        repo.get_by_id.return_value = STORED
        assert GetBookUseCase(repo).execute(2).value == STORED

    def test_missing_is_not_found_without_message(self, repo) -> None:
        repo.get_by_id.return_value = None
        result = GetBookUseCase(repo).execute(999)
        assert result.error.kind is ErrorKind.NOT_FOUND
        assert result.error.message == ""


class TestCreateBookUseCase:
    """Tests for the CreateBookUseCase."""

    def test_valid_book_is_stored_without_id(self, repo) -> None:
        repo.add.side_effect = lambda book: Book(7, book.title, book.author, book.publication_date, book.price)
        command = CreateBookCommand("1984", "George Orwell", date(1949, 6, 8), Decimal("11.99"))

        result = CreateBookUseCase(repo).execute(command)

        assert result.ok
        assert result.value.id == 7
        stored = repo.add.call_args.args[0]
        assert stored.id is None
        assert stored.title == "1984"

    def test_invalid_book_is_not_stored(self, repo) -> None:
        result = CreateBookUseCase(repo).execute(CreateBookCommand(None, "A" * 51))
        assert result.error.kind is ErrorKind.VALIDATION
        assert [v.field for v in result.error.violations] == ["title", "author"]
        repo.add.assert_not_called()


class TestUpdateBookUseCase:
    """Tests for the UpdateBookUseCase."""

    def test_fields_are_overwritten_in_place(self, repo) -> None:
        repo.get_by_id.return_value = STORED
        repo.update.return_value = True

        result = UpdateBookUseCase(repo).execute(_update())

        assert result.ok
        written = repo.update.call_args.args[0]
        assert written.id == 2
        assert written.title == "Updated"
        assert written.price == Decimal("5.00")

    def test_id_mismatch_is_invalid_argument(self, repo) -> None:
        result = UpdateBookUseCase(repo).execute(_update(payload_id=999))
        assert result.error.kind is ErrorKind.INVALID_ARGUMENT
        assert result.error.message == ID_MISMATCH_MESSAGE
        repo.get_by_id.assert_not_called()

    def test_missing_body_id_is_mismatch(self, repo) -> None:
        result = UpdateBookUseCase(repo).execute(_update(payload_id=None))
        assert result.error.kind is ErrorKind.INVALID_ARGUMENT

    def test_missing_book_is_not_found(self, repo) -> None:
        repo.get_by_id.return_value = None
        result = UpdateBookUseCase(repo).execute(_update(book_id=999, payload_id=999))
        assert result.error.kind is ErrorKind.NOT_FOUND
        repo.update.assert_not_called()

    def test_invalid_fields_rejected_first(self, repo) -> None:
        result = UpdateBookUseCase(repo).execute(_update(payload_id=999, title=""))
        assert result.error.kind is ErrorKind.VALIDATION

    def test_row_deleted_before_write_is_not_found(self, repo) -> None:
        repo.get_by_id.return_value = STORED
        repo.update.return_value = False
        result = UpdateBookUseCase(repo).execute(_update())
        assert result.error.kind is ErrorKind.NOT_FOUND


class TestDeleteBookUseCase:
    """Tests for the DeleteBookUseCase."""

    def test_deleted(self, repo) -> None:
        repo.delete.return_value = True
        assert DeleteBookUseCase(repo).execute(3).ok

    def test_missing_is_not_found(self, repo) -> None:
        repo.delete.return_value = False
        assert DeleteBookUseCase(repo).execute(3).error.kind is ErrorKind.NOT_FOUND


class TestSearchBooksUseCase:
    """Tests for the SearchBooksUseCase."""

    @pytest.mark.parametrize("query", [None, "", "   ", "\t\n"])
    def test_blank_query_rejected(self, repo, query) -> None:
        result = SearchBooksUseCase(repo).execute(SearchBooksQuery(query))
        assert result.error.kind is ErrorKind.INVALID_ARGUMENT
        repo.search.assert_not_called()

    def test_no_matches_is_success(self, repo) -> None:
        repo.search.return_value = []
        result = SearchBooksUseCase(repo).execute(SearchBooksQuery("nothing"))
        assert result.ok
        assert result.value == []
