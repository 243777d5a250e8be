"""
Data Transfer Objects for the books application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class ListBooksQuery:
    """Input DTO for a paginated listing.

    Attributes:
        page: 1-based page number.
        page_size: Number of books per page.
    """

    page: int = 1
    page_size: int = 10


@dataclass(frozen=True)
class CreateBookCommand:
    """Input DTO for creating a book. Fields are unvalidated."""

    title: str | None
    author: str | None
    publication_date: date | None = None
    price: Decimal | None = None


@dataclass(frozen=True)
class UpdateBookCommand:
    """Input DTO for overwriting a book.

    Attributes:
        book_id: Identifier taken from the request path.
        payload_id: Identifier embedded in the request body, if any.
    """

    book_id: int
    payload_id: int | None
    title: str | None
    author: str | None
    publication_date: date | None = None
    price: Decimal | None = None


@dataclass(frozen=True)
class SearchBooksQuery:
    """Input DTO for a title/author search."""

    query: str | None
