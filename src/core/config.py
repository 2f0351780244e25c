"""Application settings, loaded from environment variables (prefix CUBE_) or a .env file."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CUBE_", env_file=".env", extra="ignore")

    # Database
    database_url: str = "sqlite:///./cube.db"
    database_echo: bool = False

    # Solver collaborator
    solver_timeout_seconds: float = 10.0

    # Scrambler
    default_scramble_length: int = 25

    log_level: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
