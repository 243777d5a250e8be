"""
Database engine and schema.

Builds the SQLAlchemy engine from the configured URL and owns the
table metadata. The schema is created on start-up if it is missing.
"""

import logging

from sqlalchemy import Column, Date, Integer, MetaData, Numeric, String, Table, create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

metadata = MetaData()

books_table = Table(
    "books",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("title", String(100), nullable=False),
    Column("author", String(50), nullable=False),
    Column("publication_date", Date, nullable=True),
    Column("price", Numeric(10, 2), nullable=True),
    # AUTOINCREMENT keeps SQLite from reusing ids of deleted rows.
    sqlite_autoincrement=True,
)


def build_engine(database_url: str) -> Engine:
    """Build a SQLAlchemy engine for ``database_url``.

    SQLite connections are shared across the request thread pool, and an
    in-memory SQLite database is pinned to a single connection so every
    request sees the same data.

    Args:
        database_url: SQLAlchemy database URL.

    Returns:
        A configured Engine.
    """
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return create_engine(url, pool_pre_ping=True)

    kwargs: dict = {"connect_args": {"check_same_thread": False}}
    if url.database in (None, "", ":memory:"):
        kwargs["poolclass"] = StaticPool
    return create_engine(url, **kwargs)


def ensure_schema(engine: Engine) -> None:
    """Create the books table if it does not exist yet."""
    metadata.create_all(engine)
    logger.info("Database schema ready (%s)", engine.url.render_as_string(hide_password=True))
