"""Load and save the user settings record."""

from __future__ import annotations

import json
import logging
import sqlite3
from typing import Optional

from core.constants import SETTINGS_CATEGORY, SETTINGS_KEY_PREFIX
from core.infrastructure.keyring_service import KeyringService, get_keyring_service
from core.models import UserSettings
from .database import Database
from .settings_repository import SettingsRepository

logger = logging.getLogger(__name__)


class UserSettingsStore:
    """
    Persistence service for the whole settings record.

    Every field is one JSON-encoded row in the ``user`` category. The API key
    list goes to the OS keyring when a backend is available and falls back to
    the database otherwise.
    """

    API_KEY_FIELD = "api_key"

    def __init__(
        self,
        database: Optional[Database] = None,
        keyring_service: Optional[KeyringService] = None,
    ):
        self._db = database or Database()
        self._repo = SettingsRepository(self._db)
        self._keyring = keyring_service or get_keyring_service()

    def load(self) -> Optional[UserSettings]:
        """
        Read the persisted record.

        Returns:
            The stored record layered over defaults, or None when nothing is
            stored or the stored data cannot be read.
        """
        try:
            rows = self._repo.get_by_category(SETTINGS_CATEGORY)
        except sqlite3.Error as exc:
            logger.warning("Could not read stored settings: %s", exc)
            return None

        if not rows:
            return None

        try:
            values = {
                row.key[len(SETTINGS_KEY_PREFIX):]: json.loads(row.value)
                for row in rows
                if row.key.startswith(SETTINGS_KEY_PREFIX)
            }
            if self._keyring.is_available:
                api_keys = self._keyring.get_api_keys()
                if api_keys is not None:
                    values[self.API_KEY_FIELD] = api_keys
            return UserSettings.from_mapping(values)
        except (ValueError, TypeError) as exc:
            logger.warning("Ignoring malformed stored settings: %s", exc)
            return None

    def save(self, settings: UserSettings) -> None:
        """
        Overwrite the persisted record with ``settings``.

        Raises:
            sqlite3.Error: If the database write fails.
        """
        data = settings.to_mapping()
        if self._keyring.is_available:
            api_keys = data.pop(self.API_KEY_FIELD)
            if not self._keyring.store_api_keys(api_keys):
                logger.warning("Keyring write failed, storing API keys in database")
                # load() prefers the keyring, so a stale credential would shadow the row
                self._keyring.delete_credential("api_keys")
                data[self.API_KEY_FIELD] = api_keys

        self._repo.replace_category(
            SETTINGS_CATEGORY,
            {
                f"{SETTINGS_KEY_PREFIX}{name}": json.dumps(value)
                for name, value in data.items()
            },
        )
        logger.debug("Saved %d settings fields", len(data))

    def clear(self) -> None:
        """Remove every stored settings field."""
        removed = self._repo.delete_category(SETTINGS_CATEGORY)
        if self._keyring.is_available:
            self._keyring.delete_credential("api_keys")
        logger.info("Cleared %d stored settings fields", removed)
