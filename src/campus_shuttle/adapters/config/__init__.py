"""Configuration adapters."""

from campus_shuttle.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
