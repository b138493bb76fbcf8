"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================

_GROUP_CONFIG = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore", populate_by_name=True)


class PostgreSQLConfig(BaseSettings):
    """PostgreSQL database configuration."""

    db: str = Field(default="minishop", alias="POSTGRES_DB", description="PostgreSQL database name")
    user: str = Field(default="minishop", alias="POSTGRES_USER", description="PostgreSQL database user")
    password: str = Field(default="changeme", alias="POSTGRES_PASSWORD", description="PostgreSQL database password")
    host: Optional[str] = Field(
        default=None, alias="POSTGRES_HOST", description="PostgreSQL host; unset means no PostgreSQL server"
    )
    port: int = Field(default=5432, alias="POSTGRES_PORT", description="PostgreSQL database port number")

    model_config = _GROUP_CONFIG

    @property
    def url(self) -> Optional[str]:
        """Async SQLAlchemy URL for this PostgreSQL server, ``None`` without a host."""
        if not self.host:
            return None
        return f"postgresql+asyncpg://{self.user}:{self.password}@{self.host}:{self.port}/{self.db}"


class CORSConfig(BaseSettings):
    """CORS configuration."""

    origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS", description="Allowed CORS origins (use * for all)")
    allow_credentials: bool = Field(
        default=True, alias="CORS_ALLOW_CREDENTIALS", description="Allow credentials in CORS requests"
    )
    allow_methods: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_METHODS", description="Allowed HTTP methods (use * for all)"
    )
    allow_headers: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_HEADERS", description="Allowed HTTP headers (use * for all)"
    )

    model_config = _GROUP_CONFIG


class LogfireConfig(BaseSettings):
    """Logfire monitoring configuration."""

    enabled: bool = Field(default=False, alias="LOGFIRE_ENABLED", description="Send traces to Logfire")
    token: Optional[str] = Field(default=None, alias="LOGFIRE_TOKEN", description="Logfire write token")
    service_name: str = Field(
        default="minishop-server", alias="LOGFIRE_SERVICE_NAME", description="Service name reported to Logfire"
    )
    environment: str = Field(
        default="development", alias="LOGFIRE_ENVIRONMENT", description="Deployment environment label"
    )

    model_config = _GROUP_CONFIG


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # minishop Server Configuration
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="minishop server host address to bind to",
        alias="MINISHOP_SERVER_HOST",
    )
    server_port: int = Field(
        default=8000,
        description="minishop server port number",
        alias="MINISHOP_SERVER_PORT",
    )
    log_level: str = Field(
        default="INFO",
        description="minishop server logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="MINISHOP_LOG_LEVEL",
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: str = Field(
        default="sqlite+aiosqlite:///./minishop.db",
        description="Async database URL; defaults to the POSTGRES_* server when POSTGRES_HOST is set",
        alias="DATABASE_URL",
    )
    database_echo: bool = Field(
        default=False,
        description="Echo every SQL statement through the sqlalchemy.engine logger",
        alias="DATABASE_ECHO",
    )
    create_tables_on_startup: bool = Field(
        default=True,
        description="Create missing tables at startup (dev/SQLite); use Alembic in production",
        alias="MINISHOP_CREATE_TABLES",
    )

    # =====================================================================
    # Query Configuration
    # =====================================================================
    order_search_max_results: int = Field(
        default=1000,
        ge=1,
        description="Upper bound on rows returned by the dynamic order search",
        alias="MINISHOP_ORDER_SEARCH_MAX_RESULTS",
    )

    @model_validator(mode="after")
    def _database_url_from_postgres(self) -> "Settings":
        """Point at the POSTGRES_* server when DATABASE_URL was not given."""
        if "database_url" not in self.model_fields_set:
            postgres_url = self.postgres.url
            if postgres_url:
                self.database_url = postgres_url
        return self

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def postgres(self) -> PostgreSQLConfig:
        """Get PostgreSQL configuration from environment variables."""
        return PostgreSQLConfig()

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration from environment variables."""
        return CORSConfig()

    @property
    def logfire(self) -> LogfireConfig:
        """Get Logfire configuration from environment variables."""
        return LogfireConfig()


settings = Settings()
