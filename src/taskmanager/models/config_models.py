"""Configuration models for the Task Manager service and CLI."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

DEFAULT_ALLOWED_ORIGINS = ["http://localhost:*", "https://*.onrender.com"]


class DatabaseConfig(BaseModel):
    """Database configuration."""

    path: str | None = Field(
        default=None, description="SQLite file path; None uses the user data dir"
    )


class ServerConfig(BaseModel):
    """HTTP server configuration."""

    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8080, ge=1, le=65535)
    debug: bool = Field(default=False)
    api_prefix: str = Field(default="")

    @field_validator("api_prefix")
    @classmethod
    def normalize_prefix(cls, v: str) -> str:
        """Store the prefix as ``/segment`` without a trailing slash."""
        v = v.strip().strip("/")
        return f"/{v}" if v else ""


class CorsConfig(BaseModel):
    """Cross-origin policy for browser clients."""

    allowed_origins: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS)
    )

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def split_origins(cls, v):
        """Accept a comma-separated string as well as a list."""
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")
    console: bool = Field(default=True)

    @field_validator("level")
    @classmethod
    def upper_level(cls, v: str) -> str:
        return v.strip().upper()


class ClientConfig(BaseModel):
    """Configuration of the HTTP client used by the ``tasks`` commands."""

    endpoint: str = Field(default="http://127.0.0.1:8080")
    timeout: int = Field(default=30)
    retry: int = Field(default=3)


class Settings(BaseModel):
    """Main Task Manager configuration."""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    cors: CorsConfig = Field(default_factory=CorsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    client: ClientConfig = Field(default_factory=ClientConfig)
