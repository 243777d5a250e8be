"""
Pydantic schemas for the books API contract.

Wire names are camelCase (``publicationDate``). Request fields are all
optional at this layer: required-field and range rules are enforced by
the domain validation so every violation is reported together.
No business logic belongs here.
"""

from datetime import date, datetime, time
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from app.domain.books.entities import Book
from app.shared.errors.handlers import ErrorEnvelope

# Prices travel as JSON numbers, not strings.
JsonDecimal = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    """Base model using camelCase aliases on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BookPayload(CamelModel):
    """Request body for creating or replacing a book.

    Attributes:
        id: Ignored on create; must equal the path id on update.
        title: Book title.
        author: Author name.
        publication_date: ISO date or date-time; only the date is kept.
        price: Decimal price.
    """

    id: int | None = None
    title: str | None = None
    author: str | None = None
    publication_date: datetime | None = Field(
        default=None, description="Publication date (ISO 8601)"
    )
    price: Decimal | None = Field(default=None, description="Price, 0.01 to 10000.00")

    def publication_day(self) -> date | None:
        """Return the calendar date of ``publication_date``."""
        if self.publication_date is None:
            return None
        return self.publication_date.date()


class BookResponse(CamelModel):
    """A stored book."""

    id: int
    title: str
    author: str
    publication_date: datetime | None = None
    price: JsonDecimal | None = None

    @classmethod
    def from_entity(cls, book: Book) -> "BookResponse":
        published = None
        if book.publication_date is not None:
            published = datetime.combine(book.publication_date, time.min)
        return cls(
            id=book.id,
            title=book.title,
            author=book.author,
            publication_date=published,
            price=book.price,
        )


class ProblemResponse(BaseModel):
    """Body of a 400/404 answered directly by a route."""

    detail: str


class ValidationProblemResponse(ProblemResponse):
    """Body of a 400 caused by invalid book fields."""

    errors: dict[str, list[str]]


class ErrorResponse(ErrorEnvelope):
    """Envelope returned for failures no route handled."""


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str
