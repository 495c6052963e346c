"""Application configuration."""

from typing import Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseModel):
    """Database configuration."""

    url: str = "postgresql+asyncpg://localhost:5432/juicebox-dev"
    pool_size: int = 5
    max_overflow: int = 10

    # Log every SQL statement (noisy, development only)
    echo: bool = False


class AuthSettings(BaseModel):
    """Authentication configuration."""

    # JWT settings
    jwt_secret: str = "CHANGE_ME_IN_PRODUCTION"  # Must be overridden in production
    jwt_algorithm: str = "HS256"
    jwt_expiry_days: int = 7

    # bcrypt work factor for stored credentials
    # Tests lower this to keep hashing fast
    bcrypt_rounds: int = 12


class APISettings(BaseModel):
    """API configuration."""

    cors_origins: list[str] = [
        "http://localhost:3000",  # Local frontend
        "http://localhost:5173",  # Vite default
    ]


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, nested sections use ``__``:

        DATABASE__URL=postgresql+asyncpg://juicebox:juicebox@db:5432/juicebox
        AUTH__JWT_SECRET=...
        ENVIRONMENT=production
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows DATABASE__URL syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    host: str = "0.0.0.0"
    port: int = 8000

    # Nested settings
    database: DatabaseSettings = DatabaseSettings()
    auth: AuthSettings = AuthSettings()
    api: APISettings = APISettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @property
    def database_url(self) -> str:
        """Shortcut for the database URL."""
        return self.database.url
