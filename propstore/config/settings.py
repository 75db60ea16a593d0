"""
propstore Configuration Settings

This module contains the configuration constants for loading and storing
properties. Values marked with an environment variable can be overridden
without touching the code.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Loader and store configuration settings."""

    # Token buffer settings
    INITIAL_KEY_CAPACITY: int = 32
    INITIAL_VALUE_CAPACITY: int = 64
    MAX_TOKEN_LENGTH: int = int(os.environ.get("PROPSTORE_MAX_TOKEN_LENGTH", "0"))  # 0 means unlimited

    # Store settings
    MAX_ENTRIES: int = int(os.environ.get("PROPSTORE_MAX_ENTRIES", "0"))  # 0 means unlimited

    # Source settings
    READ_BUFFER_SIZE: int = 4096
    ENCODING: str = os.environ.get("PROPSTORE_ENCODING", "utf-8")

    # Logging settings
    DEBUG: bool = os.environ.get("PROPSTORE_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("PROPSTORE_LOG_LEVEL", "INFO")


# Global settings instance
settings = Settings()
