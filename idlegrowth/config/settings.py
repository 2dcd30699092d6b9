"""
Configuration Management for Idle Growth

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: Only the surroundings are configurable (logging, event
history, page title). The growth constants are fixed in
idlegrowth.models.state and idlegrowth.notation.formatter.
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GameSettings(BaseSettings):
    """
    Main application settings.
    
    Loads configuration from IDLEGROWTH_* environment variables and .env file.
    """
    
    model_config = SettingsConfigDict(
        env_prefix="IDLEGROWTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )
    
    # Environment
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode (logs every growth tick)"
    )
    
    # Logging
    log_level: str = Field(
        default="INFO",
        description="Standard library log level name"
    )
    event_history_size: int = Field(
        default=100,
        ge=0,
        le=10000,
        description="How many recent events a session keeps in memory"
    )
    
    # UI
    page_title: str = Field(
        default="Idle Growth",
        description="Title shown by the Streamlit app"
    )
    
    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept any case, store the canonical upper-case name."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level
    
    @property
    def effective_log_level(self) -> int:
        """Numeric level; debug mode always lowers it to DEBUG."""
        if self.debug_mode:
            return logging.DEBUG
        return logging.getLevelNamesMapping()[self.log_level]


@lru_cache()
def get_settings() -> GameSettings:
    """
    Get application settings (cached).
    
    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return GameSettings()
