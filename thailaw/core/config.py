"""Configuration management for Thai Law Lite."""

from pathlib import Path
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="THAILAW_",
        case_sensitive=False,
        extra="ignore",
    )

    # Paths
    project_root: Path = Path(__file__).parent.parent.parent
    database_path: Path = Path("./data/database.db")
    seed_path: Path = Path("./data/seed")

    # Logging
    debug: bool = False
    log_json: bool = True

    # Response metadata
    staleness_threshold_days: int = 30

    # Search Settings
    search_default_limit: int = 10
    search_max_limit: int = 50
    stance_default_limit: int = 5
    stance_max_limit: int = 20
    eu_search_default_limit: int = 20
    eu_search_max_limit: int = 100

    # Provision retrieval
    max_all_provisions: int = 200  # Safety cap when a whole statute is requested


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
