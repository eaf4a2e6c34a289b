"""Configuration for monadcase, loaded from MONADCASE_* environment variables."""

from .settings import MonadcaseSettings, clear_settings_cache, get_settings

__all__ = ["MonadcaseSettings", "get_settings", "clear_settings_cache"]
