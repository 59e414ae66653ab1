# Gemini Desk - Core Package
"""
Core package for Gemini Desk.
Settings models, persistence and remote services, usable without the UI layer.
"""

from core.config import get_env_api_base_url, get_env_api_key
from core.models import ThemeMode, UserSettings

__all__ = [
    "get_env_api_base_url",
    "get_env_api_key",
    "ThemeMode",
    "UserSettings",
]
