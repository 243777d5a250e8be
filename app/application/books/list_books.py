"""
Use case: List books one page at a time.

Input: ListBooksQuery (page, page_size)
Output: Result[list[Book]]
Side effects: None (read-only query).
Failure cases:
    INVALID_ARGUMENT when page or page_size is below 1.
    NOT_FOUND when page is past the last page.
"""

import logging

from app.application.books.dtos import ListBooksQuery
from app.application.books.results import ErrorKind, Result
from app.domain.books.entities import Book
from app.domain.books.pagination import page_offset, total_pages
from app.domain.books.ports import BookRepository

logger = logging.getLogger(__name__)

INVALID_PAGING_MESSAGE = "Page and pageSize must be greater than 0."
PAGE_OUT_OF_RANGE_MESSAGE = "Page number exceeds total pages."


class ListBooksUseCase:
    """Orchestrates a paginated listing of the catalog.

    With an empty catalog there are zero pages, so a strict check would
    answer NOT_FOUND even for page 1. ``allow_empty_first_page`` makes
    that case an empty success instead; later pages stay NOT_FOUND.
    """

    def __init__(
        self, book_repo: BookRepository, allow_empty_first_page: bool = True
    ) -> None:
        """Initialize the use case.

        Args:
            book_repo: Repository for reading books.
            allow_empty_first_page: Answer page 1 of an empty catalog with
                an empty list rather than NOT_FOUND.
        """
        self._book_repo = book_repo
        self._allow_empty_first_page = allow_empty_first_page

    def execute(self, query: ListBooksQuery) -> Result[list[Book]]:
        """Run the list books use case.

        Args:
            query: Page number and page size.

        Returns:
            The books on the requested page, or an error.
        """
        if query.page < 1 or query.page_size < 1:
            logger.warning(
                "Rejected paging: page=%d, page_size=%d", query.page, query.page_size
            )
            return Result.failure(ErrorKind.INVALID_ARGUMENT, INVALID_PAGING_MESSAGE)

        total = self._book_repo.count()
        pages = total_pages(total, query.page_size)

        if total == 0 and query.page == 1 and self._allow_empty_first_page:
            return Result.success([])

        if query.page > pages:
            logger.warning(
                "Page %d requested but only %d page(s) exist", query.page, pages
            )
            return Result.failure(ErrorKind.NOT_FOUND, PAGE_OUT_OF_RANGE_MESSAGE)

        books = self._book_repo.list_range(
            offset=page_offset(query.page, query.page_size),
            limit=query.page_size,
        )
        logger.info(
            "Listed %d book(s): page=%d/%d, page_size=%d",
            len(books),
            query.page,
            pages,
            query.page_size,
        )
        return Result.success(books)
