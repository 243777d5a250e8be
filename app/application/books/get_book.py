"""
Use case: Fetch a single book by id.

Input: book id
Output: Result[Book]
Side effects: None (read-only query).
Failure cases: NOT_FOUND when no book has that id.
"""

import logging

from app.application.books.results import ErrorKind, Result
from app.domain.books.entities import Book
from app.domain.books.ports import BookRepository

logger = logging.getLogger(__name__)


class GetBookUseCase:
    """Orchestrates reading one book."""

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def execute(self, book_id: int) -> Result[Book]:
        """Return the book with ``book_id``, or NOT_FOUND."""
        book = self._book_repo.get_by_id(book_id)
        if book is None:
            logger.warning("Book not found: id=%d", book_id)
            return Result.failure(ErrorKind.NOT_FOUND)
        return Result.success(book)
