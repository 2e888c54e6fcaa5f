"""
Configuration management for kvrepo.

Loads settings from ``KVREPO_``-prefixed environment variables or a
``.env`` file.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Repository settings loaded from environment variables.

    All settings can be overridden via environment variables, e.g.
    ``KVREPO_CODEC=pickle``.
    """

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # Key namespaces (must not overlap)
    ACCOUNT_KEY_PREFIX: str = "account:"
    TODO_KEY_PREFIX: str = "todo:"

    # Serialization
    CODEC: str = "json"

    model_config = SettingsConfigDict(
        env_prefix="KVREPO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
