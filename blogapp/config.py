"""
Blog Backend — Application Configuration
========================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types and ranges, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time.

Environment:
    DATABASE_URL   Database endpoint (async SQLAlchemy URL)
    DATABASE_KEY   Access key for the database, applied as the URL password
    PORT           Listening port (default 3001)
    BLOG_API_URL   Base URL the client talks to
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import make_url


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have development defaults. Deployments override
    DATABASE_URL and DATABASE_KEY at minimum.
    """

    # ── Database ──────────────────────────────────────────────────────────
    # Format: postgresql+asyncpg://user@host:port/dbname
    database_url: str = Field(
        default="postgresql+asyncpg://blog@localhost:5432/blog",
        description="Async database endpoint URL",
    )

    # Kept out of the URL so the endpoint can be shared without the secret
    database_key: str = Field(
        default="",
        description="Database access key, used as the connection password",
    )

    db_pool_size: int = Field(default=5, ge=1, le=100)
    db_max_overflow: int = Field(default=5, ge=0, le=50)
    db_pool_pre_ping: bool = Field(default=True)

    @property
    def database_url_with_key(self) -> str:
        """
        What: The database URL with DATABASE_KEY applied as its password.
        Why property: The key and the endpoint arrive as separate env vars.
        """
        if not self.database_key:
            return self.database_url
        url = make_url(self.database_url).set(password=self.database_key)
        return url.render_as_string(hide_password=False)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs
    cors_origins: str = Field(default="http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3001, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Client ────────────────────────────────────────────────────────────
    blog_api_url: str = Field(default="http://localhost:3001")
    client_timeout: float = Field(default=10.0, gt=0)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # DATABASE_URL and database_url both work
        "extra": "ignore",
    }


# Singleton instance — imported throughout the application
settings = Settings()
