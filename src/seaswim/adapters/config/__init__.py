"""Configuration adapters."""

from seaswim.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
