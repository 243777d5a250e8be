"""
Shared fixtures for the Book API tests.

Every test gets its own in-memory SQLite database, injected into the
application through FastAPI dependency overrides.
"""

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine

from app.domain.books.entities import Book
from app.infrastructure.books.book_repository import SqlBookRepositoryAdapter
from app.infrastructure.database import build_engine, ensure_schema
from app.interfaces.books.dependencies import get_engine
from app.main import app

SEED_BOOKS = [
    Book(None, "Test Book 1", "Test Author 1", date(2020, 1, 1), Decimal("19.99")),
    Book(None, "Test Book 2", "Test Author 2", date(2021, 2, 2), Decimal("29.99")),
    Book(None, "Test Book 3", "Test Author 3", date(2022, 3, 3), Decimal("39.99")),
]


@pytest.fixture
def engine():
    """Fresh in-memory database with the books table."""
    engine = build_engine("sqlite://")
    ensure_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def repository(engine: Engine) -> SqlBookRepositoryAdapter:
    return SqlBookRepositoryAdapter(engine=engine)


@pytest.fixture
def seeded_repository(repository: SqlBookRepositoryAdapter) -> SqlBookRepositoryAdapter:
    """Repository holding the three seed books (ids 1, 2, 3)."""
    for book in SEED_BOOKS:
        repository.add(book)
    return repository


@pytest.fixture
def empty_client(engine: Engine):
    """Client against an empty catalog."""
    app.dependency_overrides[get_engine] = lambda: engine
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def client(seeded_repository: SqlBookRepositoryAdapter, empty_client: TestClient) -> TestClient:
    """Client against a catalog seeded with three books."""
    return empty_client
