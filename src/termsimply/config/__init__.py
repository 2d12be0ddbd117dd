"""Configuration package."""

from termsimply.config.settings import (
    EvalSettings,
    LogSettings,
    Settings,
    load_settings,
)

__all__ = [
    "EvalSettings",
    "LogSettings",
    "Settings",
    "load_settings",
]
