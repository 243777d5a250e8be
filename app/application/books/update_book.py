"""
Use case: Overwrite the fields of an existing book.

Input: UpdateBookCommand
Output: Result[None]
Side effects: Updates one row in place.
Failure cases:
    VALIDATION when a field rule is broken.
    INVALID_ARGUMENT when the path id and the body id differ.
    NOT_FOUND when no book has that id.
"""

import logging
from dataclasses import replace

from app.application.books.dtos import UpdateBookCommand
from app.application.books.results import ErrorKind, Result
from app.domain.books.ports import BookRepository
from app.domain.books.validation import validate_book_fields

logger = logging.getLogger(__name__)

ID_MISMATCH_MESSAGE = "ID in URL and body must match."


class UpdateBookUseCase:
    """Orchestrates a full-field overwrite of a stored book.

    The stored record is loaded and only its writable fields are replaced,
    so the id and any other stored state are kept.
    """

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def execute(self, command: UpdateBookCommand) -> Result[None]:
        """Run the update book use case.

        Args:
            command: Path id, body id and the new field values.

        Returns:
            An empty success, or an error.
        """
        violations = validate_book_fields(
            title=command.title,
            author=command.author,
            publication_date=command.publication_date,
            price=command.price,
        )
        if violations:
            logger.warning(
                "Rejected update of book id=%d: %s",
                command.book_id,
                ", ".join(v.field for v in violations),
            )
            return Result.failure(ErrorKind.VALIDATION, violations=violations)

        if command.payload_id != command.book_id:
            logger.warning(
                "Id mismatch on update: path=%d, body=%s",
                command.book_id,
                command.payload_id,
            )
            return Result.failure(ErrorKind.INVALID_ARGUMENT, ID_MISMATCH_MESSAGE)

        existing = self._book_repo.get_by_id(command.book_id)
        if existing is None:
            logger.warning("Book not found for update: id=%d", command.book_id)
            return Result.failure(ErrorKind.NOT_FOUND)

        updated = replace(
            existing,
            title=command.title,
            author=command.author,
            publication_date=command.publication_date,
            price=command.price,
        )
        if not self._book_repo.update(updated):
            # Deleted between the read and the write.
            logger.warning("Book vanished during update: id=%d", command.book_id)
            return Result.failure(ErrorKind.NOT_FOUND)

        logger.info("Updated book id=%d", command.book_id)
        return Result.success()
