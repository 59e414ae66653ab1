"""Persistence package exports."""

from .database import Database
from .settings_repository import SettingsRepository
from .user_settings_store import UserSettingsStore

__all__ = [
    "Database",
    "SettingsRepository",
    "UserSettingsStore",
]
