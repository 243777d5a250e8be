"""
Domain entities for the books bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Book:
    """A book in the catalog.

    Attributes:
        id: Storage-assigned identifier. None until the book is persisted.
        title: Book title (required, at most 100 characters).
        author: Author name (required, at most 50 characters).
        publication_date: Calendar date of publication, if known.
        price: Price in the catalog currency, if set.
    """

    id: int | None
    title: str
    author: str
    publication_date: date | None = None
    price: Decimal | None = None


@dataclass(frozen=True)
class FieldViolation:
    """A single failed validation rule on a book field."""

    field: str
    message: str
