"""
settings.py

This module provides application configuration management for compio.

Features:
- Centralized configuration using Pydantic settings
- Constants for package-wide use

Usage:
Import appsettings for configuration values.

Environment:
- Set `COMPIO_BEQUIET=false` to see debug logging on stderr.
- Set `COMPIO_CHUNK_SIZE=<bytes>` to change the refill size of readers.
"""

from typing import Final
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Bytes requested from the source on each buffer refill
DEFAULT_CHUNK_SIZE: Final[int] = 400_000


class App(BaseSettings):
    """
    Application settings model.

    Settings can be overridden through environment variables with the
    COMPIO_ prefix.

    Attributes:
        beQuiet: Suppress debug logging output
        chunk_size: Bytes requested per buffer refill
        strict: Stop the command line reader at the first parse error
    """

    beQuiet: bool = True
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)
    strict: bool = False

    model_config = SettingsConfigDict(
        env_prefix="COMPIO_",  # Environment variables with this prefix override settings
        case_sensitive=False,  # Allow case-insensitive environment variables
        extra="ignore",
    )


# Create the application settings instance
appsettings: Final[App] = App()
