"""
Adapter: Book persistence.

Implements the BookRepository port with SQLAlchemy Core.
Every call runs in its own transaction.
"""

import logging

from sqlalchemy import delete, func, insert, or_, select, update
from sqlalchemy.engine import Engine, Row

from app.domain.books.entities import Book
from app.domain.books.ports import BookRepository
from app.infrastructure.database import books_table

logger = logging.getLogger(__name__)

# Range of a signed 64-bit SQL INTEGER. No stored id lies outside it.
MIN_SQL_INTEGER = -(2**63)
MAX_SQL_INTEGER = 2**63 - 1


def _storable_id(book_id: int) -> bool:
    return MIN_SQL_INTEGER <= book_id <= MAX_SQL_INTEGER


def _row_to_book(row: Row) -> Book:
    return Book(
        id=row.id,
        title=row.title,
        author=row.author,
        publication_date=row.publication_date,
        price=row.price,
    )


class SqlBookRepositoryAdapter(BookRepository):
    """Stores books in a relational database.

    Implements the BookRepository port defined in the domain layer.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def add(self, book: Book) -> Book:
        """Insert a book and return it with the generated id."""
        stmt = insert(books_table).values(
            title=book.title,
            author=book.author,
            publication_date=book.publication_date,
            price=book.price,
        )
        with self._engine.begin() as conn:
            result = conn.execute(stmt)
            book_id = result.inserted_primary_key[0]
            row = conn.execute(
                select(books_table).where(books_table.c.id == book_id)
            ).one()

        logger.debug("Inserted book id=%d", book_id)
        return _row_to_book(row)

    def get_by_id(self, book_id: int) -> Book | None:
        if not _storable_id(book_id):
            return None
        stmt = select(books_table).where(books_table.c.id == book_id)
        with self._engine.connect() as conn:
            row = conn.execute(stmt).first()
        return _row_to_book(row) if row is not None else None

    def list_range(self, offset: int, limit: int) -> list[Book]:
        """Return one window of books ordered by id (insertion order).

        Args:
            offset: Number of rows to skip.
            limit: Maximum number of rows to return.

        Returns:
            List of Book entities.
        """
        offset = min(offset, MAX_SQL_INTEGER)
        limit = min(limit, MAX_SQL_INTEGER)
        stmt = (
            select(books_table)
            .order_by(books_table.c.id)
            .offset(offset)
            .limit(limit)
        )
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).fetchall()
        return [_row_to_book(row) for row in rows]

    def count(self) -> int:
        stmt = select(func.count()).select_from(books_table)
        with self._engine.connect() as conn:
            return conn.execute(stmt).scalar_one()

    def update(self, book: Book) -> bool:
        """Overwrite title, author, publication date and price.

        Args:
            book: Book carrying the id of the row and its new field values.

        Returns:
            True if the row existed and was updated.
        """
        if book.id is None or not _storable_id(book.id):
            return False
        stmt = (
            update(books_table)
            .where(books_table.c.id == book.id)
            .values(
                title=book.title,
                author=book.author,
                publication_date=book.publication_date,
                price=book.price,
            )
        )
        with self._engine.begin() as conn:
            result = conn.execute(stmt)
        return result.rowcount > 0

    def delete(self, book_id: int) -> bool:
        if not _storable_id(book_id):
            return False
        stmt = delete(books_table).where(books_table.c.id == book_id)
        with self._engine.begin() as conn:
            result = conn.execute(stmt)
        return result.rowcount > 0

    def search(self, term: str) -> list[Book]:
        """Return books whose title or author contains ``term``, ignoring case.

        Both sides are folded by the database's lower().
        LIKE wildcards in ``term`` are matched literally.
        """
        stmt = (
            select(books_table)
            .where(
                or_(
                    books_table.c.title.icontains(term, autoescape=True),
                    books_table.c.author.icontains(term, autoescape=True),
                )
            )
            .order_by(books_table.c.id)
        )
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).fetchall()
        return [_row_to_book(row) for row in rows]
