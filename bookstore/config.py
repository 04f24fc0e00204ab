"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All settings overridable from BOOKSTORE_* environment variables or .env
    - default_currency always satisfies the currency-format rule
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from bookstore.core.domain_types import DEFAULT_CURRENCY
from bookstore.core.validators import validate_currency


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BOOKSTORE_", env_file=".env", case_sensitive=False,
    )

    # Catalog
    default_currency: str = DEFAULT_CURRENCY

    @field_validator("default_currency")
    @classmethod
    def check_default_currency(cls, v: str) -> str:
        """A default that fails validation would make every default item unconstructible."""
        if not validate_currency(v):
            raise ValueError(f"default_currency must be 3 letters, got {v!r}")
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
