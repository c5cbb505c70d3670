"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - Collection genesis parameters are read once, when the collection row is seeded

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://soulforge:soulforge@db:5432/soulforge"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Collection genesis
    collection_name: str = "Soulforge"
    collection_symbol: str = "SOUL"
    max_supply: int = Field(10_000, gt=0)
    owner_address: str = Field(
        "0x000000000000000000000000000000000000dead",
        pattern=r"^0x[0-9a-fA-F]{40}$",
    )
    public_price_wei: int = Field(80_000_000_000_000_000, ge=0)   # 0.08 ether
    presale_price_wei: int = Field(50_000_000_000_000_000, ge=0)  # 0.05 ether
    placeholder_uri: str = "ipfs://placeholder/hidden.json"
    royalty_bps: int = Field(500, ge=0, le=10_000)
    royalty_receiver: str | None = Field(None, pattern=r"^0x[0-9a-fA-F]{40}$")

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
