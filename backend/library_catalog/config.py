"""Application configuration and environment variables."""
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    # memory:// selects the in-process store instead of a SQL engine
    database_url: str = "sqlite+aiosqlite:///./library.db"

    # Pagination
    default_page_size: int = 20
    max_page_size: int = 100

    # Application
    app_name: str = "Library Catalog API"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore"
    }

    @property
    def use_memory_store(self) -> bool:
        return self.database_url.startswith("memory://")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
