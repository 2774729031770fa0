"""Configuration settings for the NeuroTrack backend."""

from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    app_name: str = "NeuroTrack API"
    debug: bool = False
    log_level: str = "INFO"

    # CORS - comma-separated list of frontend origins
    allowed_origins: str = "http://localhost:3000,http://127.0.0.1:3000"

    # Record store
    data_file: Optional[str] = None  # JSONL seed, one {"table": ..., "record": ...} per line

    # Login is simulated, every request acts as this user
    default_user_id: str = "00000000-0000-0000-0000-000000000000"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "NEUROTRACK_"

    @property
    def origins(self) -> List[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
