"""
Secure credential storage using OS keyring.

Provides cross-platform secure storage for API keys using the system's
credential manager (GNOME Keyring, macOS Keychain, Windows Credential Locker).
"""

import json
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class KeyringService:
    """
    Secure credential storage using OS keyring.

    Provides unified interface for storing and retrieving API keys
    in the operating system's secure credential vault.
    """

    SERVICE_NAME = "gemini_desk"

    CREDENTIAL_NAMES = {
        "api_keys": "gemini_api_keys",
    }

    def __init__(self) -> None:
        """Initialize KeyringService; the backend is probed lazily."""
        self._available: Optional[bool] = None
        self._keyring_module = None

    @property
    def is_available(self) -> bool:
        """
        Check if keyring backend is available.

        Returns:
            True if keyring can be used, False otherwise.
        """
        if self._available is not None:
            return self._available

        try:
            import keyring
            from keyring.backends.fail import Keyring as FailKeyring

            self._keyring_module = keyring

            backend = keyring.get_keyring()
            if isinstance(backend, FailKeyring):
                logger.warning(
                    "No secure keyring backend available. "
                    "API keys will be stored in the settings database."
                )
                self._available = False
            else:
                logger.debug("Using keyring backend: %s", type(backend).__name__)
                self._available = True
        except ImportError:
            logger.warning("keyring library not installed")
            self._available = False
        except Exception as e:
            logger.warning("Failed to initialize keyring: %s", e)
            self._available = False

        return self._available

    def _get_keyring(self):
        """Get the keyring module, importing if needed."""
        if self._keyring_module is not None:
            return self._keyring_module

        if self.is_available:
            return self._keyring_module
        return None

    def _get_credential_name(self, name: str) -> str:
        return self.CREDENTIAL_NAMES.get(name.lower(), name)

    def store_credential(self, name: str, value: str) -> bool:
        """
        Store a credential in the keyring.

        Returns:
            True if stored successfully, False otherwise
        """
        if not self.is_available:
            logger.warning("Keyring not available, cannot store credential")
            return False

        try:
            keyring = self._get_keyring()
            credential_name = self._get_credential_name(name)
            keyring.set_password(self.SERVICE_NAME, credential_name, value)
            logger.debug("Stored credential: %s", credential_name)
            return True
        except Exception as e:
            logger.error("Failed to store credential %s: %s", name, e)
            return False

    def get_credential(self, name: str) -> Optional[str]:
        """
        Retrieve a credential from the keyring.

        Returns:
            The credential value, or None if not found
        """
        if not self.is_available:
            return None

        try:
            keyring = self._get_keyring()
            value = keyring.get_password(
                self.SERVICE_NAME, self._get_credential_name(name)
            )
        except Exception as e:
            logger.warning("Failed to get credential from keyring: %s", e)
            return None
        return value or None

    def delete_credential(self, name: str) -> bool:
        """
        Delete a credential from the keyring.

        Returns:
            True if deleted successfully, False otherwise
        """
        if not self.is_available:
            return False

        try:
            keyring = self._get_keyring()
            credential_name = self._get_credential_name(name)
            keyring.delete_password(self.SERVICE_NAME, credential_name)
            logger.debug("Deleted credential: %s", credential_name)
            return True
        except Exception as e:
            # keyring raises PasswordDeleteError if not found
            logger.debug("Could not delete credential %s: %s", name, e)
            return False

    def store_api_keys(self, api_keys: list[str]) -> bool:
        """Store the ordered API key list as a single JSON credential."""
        if not api_keys:
            self.delete_credential("api_keys")
            return True
        return self.store_credential("api_keys", json.dumps(list(api_keys)))

    def get_api_keys(self) -> Optional[list[str]]:
        """
        Get the stored API key list.

        Returns:
            The key list, or None when nothing usable is stored
        """
        raw = self.get_credential("api_keys")
        if raw is None:
            return None
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError:
            # Plain single key stored by hand
            return [raw]
        if not isinstance(parsed, list):
            logger.warning("Ignoring malformed API key credential")
            return None
        return [str(item) for item in parsed]


# Global singleton instance
_keyring_service: Optional[KeyringService] = None


def get_keyring_service() -> KeyringService:
    """
    Get the global KeyringService instance.

    Returns:
        The shared KeyringService instance
    """
    global _keyring_service
    if _keyring_service is None:
        _keyring_service = KeyringService()
    return _keyring_service
