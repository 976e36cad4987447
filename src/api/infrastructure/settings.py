"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        LAUNCHPAD_DB_HOST: Database host (default: localhost)
        LAUNCHPAD_DB_PORT: Database port (default: 5432)
        LAUNCHPAD_DB_DATABASE: Database name (default: launchpad)
        LAUNCHPAD_DB_USERNAME: Database user (default: launchpad)
        LAUNCHPAD_DB_PASSWORD: Database password (required in production)
        LAUNCHPAD_DB_POOL_MIN_CONNECTIONS: Minimum connections in pool (default: 2)
        LAUNCHPAD_DB_POOL_MAX_CONNECTIONS: Maximum connections in pool (default: 10)
        LAUNCHPAD_DB_ECHO: Log emitted SQL statements (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="LAUNCHPAD_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="launchpad", description="Database name")
    username: str = Field(default="launchpad", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    pool_min_connections: int = Field(
        default=2,
        description="Minimum connections in pool",
        ge=1,
        le=100,
    )
    pool_max_connections: int = Field(
        default=10,
        description="Maximum connections in pool",
        ge=1,
        le=100,
    )
    echo: bool = Field(default=False, description="Log emitted SQL statements")

    @model_validator(mode="after")
    def validate_pool_settings(self) -> "DatabaseSettings":
        """Validate pool max >= min."""
        if self.pool_max_connections < self.pool_min_connections:
            raise ValueError(
                f"pool_max_connections ({self.pool_max_connections}) must be >= "
                f"pool_min_connections ({self.pool_min_connections})"
            )
        return self

    @property
    def connection_string(self) -> str:
        """Generate a connection string (without password for logging)."""
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"


class RegistrySettings(BaseSettings):
    """Limits applied by the launchable resource registry.

    Environment variables:
        LAUNCHPAD_REGISTRY_ASSIGN_BATCH_LIMIT: Maximum new resource specs
            accepted by a single workspace assignment (default: 20)
        LAUNCHPAD_REGISTRY_WIDGET_LIMIT: Maximum dashboard widgets per owner
            (default: 20)
    """

    model_config = SettingsConfigDict(
        env_prefix="LAUNCHPAD_REGISTRY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    assign_batch_limit: int = Field(
        default=20,
        description="Maximum new resource specs per assignment call",
        ge=1,
        le=100,
    )
    widget_limit: int = Field(
        default=20,
        description="Maximum dashboard widgets per owner",
        ge=1,
        le=100,
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="Launchpad API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()

    @property
    def registry(self) -> RegistrySettings:
        """Get registry settings."""
        return get_registry_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings."""
    return DatabaseSettings()


@lru_cache
def get_registry_settings() -> RegistrySettings:
    """Get cached registry settings."""
    return RegistrySettings()
