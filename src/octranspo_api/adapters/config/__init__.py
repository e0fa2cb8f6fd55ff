"""Configuration adapters."""

from octranspo_api.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
