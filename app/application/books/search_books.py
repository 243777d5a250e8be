"""
Use case: Search books by title or author.

Input: SearchBooksQuery
Output: Result[list[Book]], possibly empty
Side effects: None (read-only query).
Failure cases: INVALID_ARGUMENT when the query is missing or blank.
"""

import logging

from app.application.books.dtos import SearchBooksQuery
from app.application.books.results import ErrorKind, Result
from app.domain.books.entities import Book
from app.domain.books.ports import BookRepository

logger = logging.getLogger(__name__)

QUERY_REQUIRED_MESSAGE = "Query string is required."


class SearchBooksUseCase:
    """Orchestrates a case-insensitive substring search.

    The query is matched as given; surrounding whitespace is part of it.
    """

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def execute(self, query: SearchBooksQuery) -> Result[list[Book]]:
        """Run the search books use case.

        Args:
            query: The raw search string.

        Returns:
            All matching books (an empty list is a success), or an error.
        """
        if query.query is None or not query.query.strip():
            return Result.failure(ErrorKind.INVALID_ARGUMENT, QUERY_REQUIRED_MESSAGE)

        books = self._book_repo.search(query.query)
        logger.info("Search %r matched %d book(s)", query.query, len(books))
        return Result.success(books)
