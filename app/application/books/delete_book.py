"""
Use case: Remove a book from the catalog.

Input: book id
Output: Result[None]
Side effects: Deletes one row.
Failure cases: NOT_FOUND when no book has that id.
"""

import logging

from app.application.books.results import ErrorKind, Result
from app.domain.books.ports import BookRepository

logger = logging.getLogger(__name__)


class DeleteBookUseCase:
    """Orchestrates deleting one book."""

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def execute(self, book_id: int) -> Result[None]:
        if not self._book_repo.delete(book_id):
            logger.warning("Book not found for delete: id=%d", book_id)
            return Result.failure(ErrorKind.NOT_FOUND)
        logger.info("Deleted book id=%d", book_id)
        return Result.success()
