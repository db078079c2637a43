from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "SEO Command Center"
    app_env: str = "development"  # development, testing, production
    debug: bool = False

    # Database (cloud mode)
    database_url: str = "sqlite+aiosqlite:///./seo_center.db"
    database_pool_size: int = 5
    database_max_overflow: int = 10
    auto_create_schema: bool = False  # Create tables on startup instead of running Alembic

    # Local persistence (guest mode)
    local_data_dir: Path = Path(".seo-center")
    local_store_key: str = "seo-platform"

    # Attachments bucket
    attachments_dir: Path = Path(".seo-center/storage")
    attachments_bucket: str = "task-attachments"
    attachments_public_url: str = "http://localhost:8000/storage"
    attachment_max_bytes: int = 5 * 1024 * 1024

    # History
    history_actor_label: str = "Admin"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    @field_validator("local_store_key", "attachments_bucket")
    @classmethod
    def validate_key(cls, v: str) -> str:
        """Keys become file and directory names, so path separators are rejected."""
        v = v.strip()
        if not v or "/" in v or "\\" in v or v in (".", ".."):
            raise ValueError(f"Invalid storage key: {v!r}")
        return v

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """Validate CORS origins - reject wildcards when credentials are used."""
        for origin in v:
            if origin == "*":
                raise ValueError(
                    "CORS wildcard '*' is not allowed when allow_credentials=True. "
                    "Specify explicit origins instead."
                )
        return v

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    return Settings()
