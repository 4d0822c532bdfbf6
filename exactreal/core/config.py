"""
Library configuration.

Centralized configuration management with environment variables.
"""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """exactreal settings"""

    model_config = SettingsConfigDict(
        env_prefix="EXACTREAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Approximate comparison
    FLOAT_TOLERANCE: float = 1e-5
    TOLERANCE_MODE: Literal["absolute", "relative"] = "absolute"
    ZERO_LEVEL: float = 1e-14

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "text"  # json or text


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
