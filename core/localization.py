"""UI language selection shared across the application."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from core.constants import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES

logger = logging.getLogger(__name__)

_SUPPORTED_BY_LOWER = {code.lower(): code for code in SUPPORTED_LANGUAGES}


def normalize_language(code: Optional[str]) -> str:
    """Map a locale code onto a supported language, defaulting to English."""
    if not code:
        return DEFAULT_LANGUAGE
    candidate = code.strip().replace("_", "-").lower()
    if candidate in _SUPPORTED_BY_LOWER:
        return _SUPPORTED_BY_LOWER[candidate]
    primary = candidate.split("-", 1)[0]
    if primary in _SUPPORTED_BY_LOWER:
        return _SUPPORTED_BY_LOWER[primary]
    return DEFAULT_LANGUAGE


class LocalizationContext(QObject):
    """Holds the active UI language."""

    language_changed = Signal(str)

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._language = DEFAULT_LANGUAGE

    @property
    def language(self) -> str:
        """Get the active language code."""
        return self._language

    def set_language(self, code: str) -> None:
        """Switch the UI language."""
        language = normalize_language(code)
        if language != (code or "").strip():
            logger.debug("Language %r resolved to %s", code, language)
        if self._language != language:
            self._language = language
            self.language_changed.emit(language)
