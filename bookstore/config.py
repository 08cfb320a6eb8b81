"""
Application Configuration Module

This module uses Pydantic Settings for type-safe configuration management.

WHY Pydantic Settings?
======================
1. Type Safety: All configuration values are validated against their types
2. Environment Variables: Automatically loads from environment variables
3. .env Support: Can load from .env files for local development
4. Validation: Catches configuration errors at startup, not runtime

A missing or malformed MongoDB setting raises a ValidationError the first
time get_settings() is called, which happens while the application module
is imported. The process never starts half-configured.

Usage:
    from bookstore.config import get_settings

    settings = get_settings()
    print(settings.mongodb_url)
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic Settings automatically:
    1. Reads from environment variables (case-insensitive)
    2. Falls back to .env file if env var not found
    3. Validates types and raises errors for invalid values
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(
        default="BookStore API",
        description="Application name displayed in docs and logs"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (detailed errors, auto-reload)"
    )
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind the server to"
    )
    port: int = Field(
        default=5000,
        description="Port to bind the server to"
    )
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production"
    )

    # -------------------------------------------------------------------------
    # MongoDB Settings
    # -------------------------------------------------------------------------
    mongodb_url: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection string"
    )
    mongodb_database: str = Field(
        default="BookStoreDB",
        description="Database holding the book collection"
    )
    mongodb_server_selection_timeout_ms: int = Field(
        default=5000,
        gt=0,
        description="How long the driver waits for a reachable server"
    )
    book_collection: str = Field(
        default="Book",
        description="Name of the collection storing book documents"
    )
    seed_demo_data: bool = Field(
        default=True,
        description="Insert the demo catalog into an empty collection (development only)"
    )

    # -------------------------------------------------------------------------
    # HTTP Settings
    # -------------------------------------------------------------------------
    allowed_origins: str = Field(
        default="http://localhost:4200",
        description="Comma-separated list of allowed CORS origins"
    )
    graphql_ide_enabled: bool = Field(
        default=True,
        description="Serve the GraphiQL IDE on GET /graphql"
    )

    # -------------------------------------------------------------------------
    # Logging Settings
    # -------------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_dir: Optional[str] = Field(
        default=None,
        description="Directory for daily rotated log files; console only when unset"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    @property
    def allowed_origins_list(self) -> List[str]:
        """Parse comma-separated CORS origins into a list."""
        return [
            origin.strip()
            for origin in self.allowed_origins.split(",")
            if origin.strip()
        ]

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate that log_level is a valid Python logging level.

        Returns:
            The validated value (uppercase)

        Raises:
            ValueError: If log level is invalid
        """
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("mongodb_url")
    @classmethod
    def validate_mongodb_url(cls, v: str) -> str:
        """
        Validate that the MongoDB connection string is usable.

        The API cannot serve a single request without its database, so an
        empty or non-MongoDB URL must stop the application at startup.

        Raises:
            ValueError: If the URL is blank or uses another scheme
        """
        v = v.strip()
        if not v:
            raise ValueError("MONGODB_URL is required")
        if not v.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError(
                "MONGODB_URL must start with 'mongodb://' or 'mongodb+srv://'"
            )
        return v

    @field_validator("mongodb_database", "book_collection")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Database and collection names cannot be blank."""
        if not v.strip():
            raise ValueError("value cannot be empty")
        return v.strip()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is a known value."""
        valid_envs = {"development", "staging", "production"}
        if v.lower() not in valid_envs:
            raise ValueError(f"environment must be one of {valid_envs}")
        return v.lower()


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    lru_cache makes this a process-wide singleton: the environment and .env
    file are read once and every module shares the same validated instance.

    Returns:
        Cached Settings instance
    """
    return Settings()
