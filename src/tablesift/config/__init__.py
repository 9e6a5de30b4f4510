"""Configuration loading."""

from tablesift.config.settings import Settings

__all__ = ["Settings"]
