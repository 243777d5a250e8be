"""
Dependency injection for the books bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the books context.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.engine import Engine

from app.application.books.create_book import CreateBookUseCase
from app.application.books.delete_book import DeleteBookUseCase
from app.application.books.get_book import GetBookUseCase
from app.application.books.list_books import ListBooksUseCase
from app.application.books.search_books import SearchBooksUseCase
from app.application.books.update_book import UpdateBookUseCase
from app.core.config import settings
from app.domain.books.ports import BookRepository
from app.infrastructure.books.book_repository import SqlBookRepositoryAdapter
from app.infrastructure.database import build_engine


@lru_cache
def get_engine() -> Engine:
    """Return the process-wide SQLAlchemy engine (connection pool)."""
    return build_engine(settings.database_url)


def get_book_repository(engine: Engine = Depends(get_engine)) -> BookRepository:
    """Build the book repository adapter."""
    return SqlBookRepositoryAdapter(engine=engine)


def get_list_books_use_case(
    repo: BookRepository = Depends(get_book_repository),
) -> ListBooksUseCase:
    """Build ListBooksUseCase with its infrastructure dependencies."""
    return ListBooksUseCase(
        book_repo=repo,
        allow_empty_first_page=settings.allow_empty_first_page,
    )


def get_get_book_use_case(
    repo: BookRepository = Depends(get_book_repository),
) -> GetBookUseCase:
    """Build GetBookUseCase with its infrastructure dependencies."""
    return GetBookUseCase(book_repo=repo)


def get_create_book_use_case(
    repo: BookRepository = Depends(get_book_repository),
) -> CreateBookUseCase:
    """Build CreateBookUseCase with its infrastructure dependencies."""
    return CreateBookUseCase(book_repo=repo)


def get_update_book_use_case(
    repo: BookRepository = Depends(get_book_repository),
) -> UpdateBookUseCase:
    """Build UpdateBookUseCase with its infrastructure dependencies."""
    return UpdateBookUseCase(book_repo=repo)


def get_delete_book_use_case(
    repo: BookRepository = Depends(get_book_repository),
) -> DeleteBookUseCase:
    """Build DeleteBookUseCase with its infrastructure dependencies."""
    return DeleteBookUseCase(book_repo=repo)


def get_search_books_use_case(
    repo: BookRepository = Depends(get_book_repository),
) -> SearchBooksUseCase:
    """Build SearchBooksUseCase with its infrastructure dependencies."""
    return SearchBooksUseCase(book_repo=repo)
