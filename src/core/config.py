"""Application configuration using Pydantic Settings."""

from enum import StrEnum
from functools import lru_cache
from pathlib import Path

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageBackend(StrEnum):
    """Where groups and users are persisted."""

    FILE = "file"
    ELASTICSEARCH = "elasticsearch"


class CatalogBackend(StrEnum):
    """Where movie metadata comes from."""

    IMDB = "imdb"
    LOCAL = "local"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="CMDB API")
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=1904)

    # Storage
    storage_backend: StorageBackend = Field(
        default=StorageBackend.FILE,
        description="Persistence backend for groups and users",
    )
    data_dir: Path = Field(
        default=Path("./data/local"),
        description="Directory holding groups.json and users.json (file backend)",
    )

    # Elasticsearch
    elasticsearch_url: str = Field(default="http://localhost:9200")
    elasticsearch_index_prefix: str = Field(
        default="",
        description="Prefix prepended to the groups/users index names",
    )
    elasticsearch_timeout_seconds: float = Field(default=10.0)

    # Movie catalog
    catalog_backend: CatalogBackend = Field(default=CatalogBackend.IMDB)
    imdb_base_url: str = Field(default="https://imdb-api.com/en/API")
    imdb_api_key: str = Field(
        default="",
        description="IMDb API key (keep secret)",
    )
    catalog_timeout_seconds: float = Field(
        default=10.0,
        description="Upper bound for a single catalog request",
    )
    catalog_local_dir: Path = Field(
        default=Path("./local_data"),
        description="Fixture directory for the local catalog backend",
    )

    # Rate Limiting
    rate_limit_enabled: bool = Field(
        default=True,
        description="Enable/disable rate limiting (disable for tests)",
    )

    # CORS
    cors_origins: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        description="Comma-separated list of allowed origins",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def groups_file(self) -> Path:
        """JSON document holding every group (file backend)."""
        return self.data_dir / "groups.json"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def users_file(self) -> Path:
        """JSON document holding every user (file backend)."""
        return self.data_dir / "users.json"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
