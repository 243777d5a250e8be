"""
Use case: Add a book to the catalog.

Input: CreateBookCommand
Output: Result[Book] carrying the storage-assigned id
Side effects: Inserts one row.
Failure cases: VALIDATION when a field rule is broken.
"""

import logging

from app.application.books.dtos import CreateBookCommand
from app.application.books.results import ErrorKind, Result
from app.domain.books.entities import Book
from app.domain.books.ports import BookRepository
from app.domain.books.validation import validate_book_fields

logger = logging.getLogger(__name__)


class CreateBookUseCase:
    """Orchestrates validating and persisting a new book."""

    def __init__(self, book_repo: BookRepository) -> None:
        """Initialize the use case.

        Args:
            book_repo: Repository that assigns ids and stores books.
        """
        self._book_repo = book_repo

    def execute(self, command: CreateBookCommand) -> Result[Book]:
        """Run the create book use case.

        Args:
            command: The unvalidated book fields.

        Returns:
            The stored book, or a VALIDATION error listing every violation.
        """
        violations = validate_book_fields(
            title=command.title,
            author=command.author,
            publication_date=command.publication_date,
            price=command.price,
        )
        if violations:
            logger.warning(
                "Rejected new book: %s", ", ".join(v.field for v in violations)
            )
            return Result.failure(ErrorKind.VALIDATION, violations=violations)

        book = self._book_repo.add(
            Book(
                id=None,
                title=command.title,
                author=command.author,
                publication_date=command.publication_date,
                price=command.price,
            )
        )
        logger.info("Created book id=%d", book.id)
        return Result.success(book)
