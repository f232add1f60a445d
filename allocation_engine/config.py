"""Application configuration via Pydantic Settings.

NOTE: Every key maps to an explicit upper-case env name (API_BASE_URL,
CACHE_MAX_SIZE, ...) so a typo in .env does not silently fall back.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Upstream feeds
    api_base_url: str = Field(default="http://localhost:4000", validation_alias="API_BASE_URL")
    feed_timeout_seconds: float = Field(default=10.0, validation_alias="FEED_TIMEOUT_SECONDS")

    # Cache
    cache_max_size: int = Field(default=100, validation_alias="CACHE_MAX_SIZE")
    cache_default_ttl_seconds: float = Field(default=300.0, validation_alias="CACHE_DEFAULT_TTL_SECONDS")
    cache_sweep_interval_seconds: float = Field(
        default=300.0,
        validation_alias="CACHE_SWEEP_INTERVAL_SECONDS",
    )

    # Per-kind TTLs
    ttl_hierarchical_structure_seconds: float = Field(
        default=900.0,
        validation_alias="TTL_HIERARCHICAL_STRUCTURE_SECONDS",
    )
    ttl_available_models_seconds: float = Field(default=600.0, validation_alias="TTL_AVAILABLE_MODELS_SECONDS")
    ttl_agents_seconds: float = Field(default=300.0, validation_alias="TTL_AGENTS_SECONDS")
    ttl_stores_seconds: float = Field(default=300.0, validation_alias="TTL_STORES_SECONDS")
    ttl_assignment_calculation_seconds: float = Field(
        default=120.0,
        validation_alias="TTL_ASSIGNMENT_CALCULATION_SECONDS",
    )

    # History
    history_max_items: int = Field(default=50, validation_alias="HISTORY_MAX_ITEMS")

    # App
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
