"""
Client configuration management
"""

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator


class Settings(BaseSettings):
    """Client settings"""
    
    # ImageOptim API
    IMAGEOPTIM_BASE_URL: str = "https://im2.io"
    IMAGEOPTIM_USERNAME: str = ""
    
    # Logging
    LOG_LEVEL: str = "INFO"
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )
    
    @field_validator("IMAGEOPTIM_BASE_URL", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v):
        if isinstance(v, str):
            return v.rstrip("/")
        return v


def configure_logging(level: str = None) -> None:
    """Configure root logging for applications embedding the client"""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


# Create settings instance
settings = Settings()
