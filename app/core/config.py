"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, with no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        environment: Run mode, "development" or "production". Error
            responses carry diagnostic details only in development.
        debug: Serve the interactive API docs.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        database_url: SQLAlchemy URL of the book store.
        host: Interface the HTTP server binds to.
        port: Port the HTTP server listens on.
        allow_empty_first_page: Answer page 1 of an empty catalog with an
            empty list instead of 404.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Book API"
    version: str = "1.0.0"
    environment: str = "production"
    debug: bool = False
    log_level: str = "INFO"

    database_url: str = "sqlite:///./books.db"

    host: str = "0.0.0.0"
    port: int = 8080

    allow_empty_first_page: bool = True

    @property
    def is_development(self) -> bool:
        """Return True when running in development mode."""
        return self.environment.strip().lower() == "development"


settings = Settings()
