"""
Environment configuration for Gemini Desk.

Environment overrides take priority over anything the user saved:
1. GEMINI_DESK_API_BASE_URL replaces the stored API base URL
2. GEMINI_DESK_API_KEY replaces the stored API key list with a single key
"""

import logging
import os
from pathlib import Path
from typing import Optional

from core.constants import APP_DIR_NAME

ENV_API_BASE_URL = "GEMINI_DESK_API_BASE_URL"
ENV_API_KEY = "GEMINI_DESK_API_KEY"

logger = logging.getLogger(__name__)


def get_app_dir() -> Path:
    """Get the per-user application data directory."""
    return Path.home() / APP_DIR_NAME


def _read_env(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def get_env_api_base_url() -> Optional[str]:
    """
    Get the API base URL override from the environment.

    Returns:
        The override URL, or None when unset or blank
    """
    value = _read_env(ENV_API_BASE_URL)
    if value:
        logger.debug("Using %s from environment", ENV_API_BASE_URL)
    return value


def get_env_api_key() -> Optional[str]:
    """
    Get the single API key override from the environment.

    Returns:
        The override key, or None when unset or blank
    """
    value = _read_env(ENV_API_KEY)
    if value:
        logger.debug("Using %s from environment", ENV_API_KEY)
    return value
