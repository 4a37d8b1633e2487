"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_enabled: Toggle for the per-client rate limiter.
        rate_limit_default: Default rate limit for all endpoints.
        mongo_url: Connection string of the service database.
        mongo_test_url: Connection string used by the integration suite.
        mongo_db: Database name.
        mongo_collection: Collection holding product documents.
        mongo_timeout_ms: Server selection timeout for the Mongo client.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "Products Service"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_enabled: bool = True
    rate_limit_default: str = "120/minute"

    mongo_url: Optional[str] = None
    mongo_test_url: Optional[str] = None
    mongo_db: str = "products"
    mongo_collection: str = "products"
    mongo_timeout_ms: int = 5000

    def require_mongo_url(self) -> str:
        """Return the service connection string.

        Raises:
            ConfigurationError: If MONGO_URL is not defined.
        """
        if not self.mongo_url:
            raise ConfigurationError(
                "Required environment variable 'MONGO_URL' is not set. "
                "Please add it to your .env file."
            )
        return self.mongo_url


settings = Settings()
