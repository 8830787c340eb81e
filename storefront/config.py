from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from storefront.schemas.seed import ChunkSizes, SeedTargets


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )

    # Database
    database_url: str
    database_echo: bool = False
    # session_replication_role needs superuser rights on PostgreSQL
    bulk_load_disable_fk_checks: bool = True

    # Storage
    storage_root: Path = Path("storage/app")
    public_disk: str = "public"

    # Logging
    log_level: str = "INFO"

    # Seeding
    random_seed: int | None = None
    seed_targets: SeedTargets = SeedTargets()
    seed_chunks: ChunkSizes = ChunkSizes()


settings = Settings()
