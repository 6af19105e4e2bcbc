"""Service settings, read from RADAR_* environment variables or a .env file."""
from functools import lru_cache
from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    strict_protocols: bool = False  # 400 on unknown protocol names instead of avoid-mech fallback

    model_config = SettingsConfigDict(
        env_prefix="RADAR_",
        env_file=".env",
        extra="ignore",
    )

@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (FastAPI dependency)."""
    return Settings()
