"""
Configuration Management Module

Configures application parameters via environment variables or .env file.
Supports SQLite (default) and PostgreSQL databases.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """
    Application Configuration Class

    All configuration items can be overridden by environment variables, with names matching fields (uppercase).
    """

    # Application Config
    APP_NAME: str = "crudmount"
    DEBUG: bool = False

    # HTTP Server Config
    HTTP_HOST: str = "0.0.0.0"
    HTTP_PORT: int = 8080

    # Database Config
    # Used as-is unless DB_HOST is set
    DATABASE_URL: str = "sqlite+aiosqlite:///./crudmount.db"
    # PostgreSQL connection parts, DB_HOST switches the store to PostgreSQL
    DB_HOST: str | None = None
    DB_PORT: int = 5432
    DB_NAME: str = ""
    DB_USER: str = ""
    DB_PASS: str = ""

    # Password Hashing Config
    # bcrypt cost factor for user passwords
    PASSWORD_HASH_ROUNDS: int = 8

    # CORS Config
    # Comma-separated list of allowed origins for CORS
    # Example: "http://localhost:3000,https://example.com"
    ALLOWED_ORIGINS: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    def get_database_url(self) -> str:
        """
        Resolve the SQLAlchemy database URL

        Returns:
            str: PostgreSQL (asyncpg) URL built from DB_* values when DB_HOST is set, otherwise DATABASE_URL
        """
        if not self.DB_HOST:
            return self.DATABASE_URL
        url = URL.create(
            "postgresql+asyncpg",
            username=self.DB_USER or None,
            password=self.DB_PASS or None,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME or None,
        )
        return url.render_as_string(hide_password=False)

    @property
    def is_sqlite(self) -> bool:
        return self.get_database_url().startswith("sqlite")


@lru_cache()
def get_settings() -> Settings:
    """
    Get application configuration (Singleton)

    Uses lru_cache to ensure configuration is loaded only once.

    Returns:
        Settings: Application configuration instance
    """
    return Settings()
