"""
Configuration Settings.

This module defines the library configuration using Pydantic's BaseSettings.
It loads configuration from environment variables (prefixed with ``EDBO_``) and
an optional .env file without explicit dotenv loading.
"""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from edbo_opendata._version import __version__

DEFAULT_BASE_URL = "https://registry.edbo.gov.ua"
DEFAULT_USER_AGENT = f"edbo-opendata/{__version__}"


# =====================================================================
# Client Configuration Model
# =====================================================================


class EdboClientConfig(BaseModel):
    """Connection settings shared by `EdboClient` and `AsyncEdboClient`."""

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Root URL of the EDBO Opendata registry.",
        examples=["https://registry.edbo.gov.ua", "http://mock"],
        min_length=1,
        max_length=512,
    )
    timeout_seconds: float = Field(
        default=30.0,
        description="Per-request timeout in seconds.",
        ge=0.1,
        le=300.0,
    )
    max_retries: int = Field(
        default=0,
        description="Extra attempts after a transport error or 5xx response. 0 disables retries.",
        ge=0,
        le=10,
    )
    backoff_initial: float = Field(default=0.5, description="First retry delay in seconds.", ge=0.0)
    backoff_factor: float = Field(default=2.0, description="Multiplier applied to the delay per retry.", ge=1.0)
    backoff_max: float = Field(default=8.0, description="Upper bound for a single retry delay.", ge=0.0)
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header sent with every request.",
        min_length=1,
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Settings
# =====================================================================


class Settings(BaseSettings):
    """
    Library settings.

    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    Every field maps to an ``EDBO_``-prefixed environment variable, e.g.
    ``EDBO_BASE_URL`` or ``EDBO_MAX_RETRIES``.
    """

    model_config = SettingsConfigDict(
        env_prefix="EDBO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =====================================================================
    # Registry Connection
    # =====================================================================
    base_url: str = Field(default=DEFAULT_BASE_URL, description="EDBO Opendata registry root URL", min_length=1, max_length=512)
    timeout_seconds: float = Field(default=30.0, description="Per-request timeout in seconds", ge=0.1, le=300.0)
    max_retries: int = Field(default=0, description="Retries for transport errors and 5xx responses", ge=0, le=10)
    backoff_initial: float = Field(default=0.5, description="Initial retry backoff in seconds", ge=0.0)
    backoff_factor: float = Field(default=2.0, description="Exponential backoff factor", ge=1.0)
    backoff_max: float = Field(default=8.0, description="Maximum retry backoff in seconds", ge=0.0)
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent header value", min_length=1)

    # =====================================================================
    # Logging
    # =====================================================================
    log_level: str = Field(default="INFO", description="Console log level")
    log_format: str = Field(default="detailed", description="Log format: simple, detailed or json")
    log_file_dir: str = Field(default="logs", description="Directory for the log file")
    enable_file_logging: bool = Field(default=False, description="Also write logs to <log_file_dir>/edbo_opendata.log")

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def client(self) -> EdboClientConfig:
        """Get client connection configuration from environment variables."""
        return EdboClientConfig.model_validate(
            self.model_dump(
                include={
                    "base_url",
                    "timeout_seconds",
                    "max_retries",
                    "backoff_initial",
                    "backoff_factor",
                    "backoff_max",
                    "user_agent",
                }
            )
        )


settings = Settings()
