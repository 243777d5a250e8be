"""
Port interfaces (ABCs) for the books bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from app.domain.books.entities import Book


class BookRepository(ABC):
    """Port for durable storage of books keyed on an integer id."""

    @abstractmethod
    def add(self, book: Book) -> Book:
        """Persist a new book and return it with its assigned id.

        Any id carried by the input is ignored.
        """
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, book_id: int) -> Book | None:
        """Return the book with the given id, or None if absent."""
        raise NotImplementedError

    @abstractmethod
    def list_range(self, offset: int, limit: int) -> list[Book]:
        """Return up to ``limit`` books starting at ``offset``.

        Books are returned in insertion order.
        """
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        """Return the total number of stored books."""
        raise NotImplementedError

    @abstractmethod
    def update(self, book: Book) -> bool:
        """Overwrite every writable field of the stored book with ``book.id``.

        Returns:
            True if a row was updated, False if no such book exists.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, book_id: int) -> bool:
        """Remove the book with the given id.

        Returns:
            True if a row was removed, False if no such book exists.
        """
        raise NotImplementedError

    @abstractmethod
    def search(self, term: str) -> list[Book]:
        """Return books whose title or author contains ``term``, ignoring case."""
        raise NotImplementedError
