"""
rest_data.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Describe the backing store (URL, schema generation, seed script).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SEED_SCRIPT = Path(__file__).parent / "data" / "import.sql"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="REST_DATA_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "rest-data"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./rest_data.db"
    # Echo generated SQL through the sqlalchemy.engine logger.
    sql_echo: bool = False
    schema_generation: Literal["none", "create", "drop-and-create"] = "drop-and-create"
    # Row inserts run after schema generation; None disables seeding.
    seed_script: Path | None = DEFAULT_SEED_SCRIPT

    # Listing
    default_page_size: int = Field(default=20, ge=1, le=1000)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Production deployments should set REST_DATA_SCHEMA_GENERATION=none and rely on
# Alembic migrations instead of drop-and-create.
