"""
Field validation rules for books.

Validation runs explicitly before any create or update is persisted and
returns every violation found, in field order, instead of stopping at
the first one.
"""

from datetime import date
from decimal import Decimal

from app.domain.books.entities import FieldViolation

TITLE_MAX_LENGTH = 100
AUTHOR_MAX_LENGTH = 50
PRICE_MIN = Decimal("0.01")
PRICE_MAX = Decimal("10000.00")
PRICE_SCALE = 2
PRICE_STEP = Decimal("0.01")


def _check_required_text(
    field: str, value: str | None, max_length: int
) -> list[FieldViolation]:
    if value is None or not value.strip():
        return [FieldViolation(field, f"The {field} field is required.")]
    if len(value) > max_length:
        return [
            FieldViolation(
                field,
                f"The field {field} must be a string with a maximum length of {max_length}.",
            )
        ]
    return []


def validate_book_fields(
    *,
    title: str | None,
    author: str | None,
    publication_date: date | None,
    price: Decimal | None,
) -> list[FieldViolation]:
    """Validate the writable fields of a book.

    Args:
        title: Required, non-blank, at most 100 characters.
        author: Required, non-blank, at most 50 characters.
        publication_date: Optional; any calendar date is accepted.
        price: Optional; when given must lie in [0.01, 10000.00] and have
            at most two decimal places.

    Returns:
        The list of violations. Empty when the fields are valid.
    """
    violations = _check_required_text("title", title, TITLE_MAX_LENGTH)
    violations += _check_required_text("author", author, AUTHOR_MAX_LENGTH)

    if price is not None and not (PRICE_MIN <= price <= PRICE_MAX):
        violations.append(
            FieldViolation(
                "price", f"The field price must be between {PRICE_MIN} and {PRICE_MAX}."
            )
        )
    elif price is not None and price != price.quantize(PRICE_STEP):
        violations.append(
            FieldViolation(
                "price",
                f"The field price must have at most {PRICE_SCALE} decimal places.",
            )
        )

    return violations
