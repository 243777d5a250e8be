"""
CLI entry point for the Book API.

Usage:
    # Serve the API (defaults from settings: 0.0.0.0:8080)
    python -m app.cli serve

    # Serve on another port with auto-reload
    python -m app.cli serve --port 9000 --reload

    # Create the database schema and exit
    python -m app.cli init-db
"""

import argparse
import logging

from app.core.config import settings
from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the HTTP server."""
    import uvicorn

    logger.info("Starting %s at http://%s:%d", settings.project_name, args.host, args.port)
    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=args.reload)


def cmd_init_db(args: argparse.Namespace) -> None:
    """Create the books table if it is missing."""
    from app.infrastructure.database import build_engine, ensure_schema

    ensure_schema(build_engine(args.database_url))


def main(argv: list[str] | None = None) -> None:
    configure_logging(level=settings.log_level)

    parser = argparse.ArgumentParser(description="Book API CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Serve
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument(
        "--host", default=settings.host,
        help=f"Interface to bind (default {settings.host})",
    )
    serve_parser.add_argument(
        "--port", type=int, default=settings.port,
        help=f"Port to listen on (default {settings.port})",
    )
    serve_parser.add_argument(
        "--reload", action="store_true",
        help="Restart the server when source files change",
    )
    serve_parser.set_defaults(func=cmd_serve)

    # Init DB
    init_parser = subparsers.add_parser("init-db", help="Create the database schema")
    init_parser.add_argument(
        "--database-url", default=settings.database_url, dest="database_url",
        help="SQLAlchemy URL (default from DATABASE_URL)",
    )
    init_parser.set_defaults(func=cmd_init_db)

    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
