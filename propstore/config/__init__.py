"""Configuration module for propstore."""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
