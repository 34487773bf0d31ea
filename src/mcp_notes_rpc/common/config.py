"""Configuration management for the notes RPC bridge."""

from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_URL = "http://127.0.0.1:3030"


class Settings(BaseSettings):
    """Global settings, read from ``NOTES_RPC_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="NOTES_RPC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    url: str = Field(
        default=DEFAULT_URL, description="Base URL of the JSON-RPC server."
    )
    timeout: float | None = Field(
        default=None,
        description="Seconds to wait for a response. Unset means wait indefinitely.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Logging level for the entry points."
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


def resolve_settings(
    file_config: dict[str, Any] | None = None, **overrides: Any
) -> Settings:
    """Merge configuration sources.

    Precedence, highest first: explicit overrides (CLI flags), environment
    and ``.env``, the ``[rpc]`` table of the config file, built-in defaults.
    Overrides whose value is ``None`` are ignored.
    """
    base = Settings()
    rpc_table = (file_config or {}).get("rpc", {})
    from_file = {
        key: value
        for key, value in rpc_table.items()
        if key in Settings.model_fields and key not in base.model_fields_set
    }
    from_flags = {key: value for key, value in overrides.items() if value is not None}
    merged = {**base.model_dump(), **from_file, **from_flags}
    return Settings(**merged)

