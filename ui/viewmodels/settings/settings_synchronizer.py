"""SettingsSynchronizer - persisted, environment-aware user settings.

Owns the in-memory settings record and keeps its collaborators in step:
every committed change after the initial load is saved, the theme and
language are applied, and credential changes trigger a refresh of the
available models list.
"""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import replace
from typing import Callable, Optional, Union

from PySide6.QtCore import QObject, Signal, Slot

from core.config import get_env_api_base_url, get_env_api_key
from core.constants import DEFAULT_AVAILABLE_MODELS
from core.localization import LocalizationContext
from core.models import MODEL_FIELDS, ThemeMode, UserSettings
from core.persistence import UserSettingsStore
from core.services.model_service import ModelService
from ui.theme import apply_theme, system_prefers_dark

from .model_list_worker import ModelListWorker

logger = logging.getLogger(__name__)

SettingsUpdate = Union[UserSettings, Callable[[UserSettings], UserSettings]]


def merge_models(fetched: list[str], known: list[str]) -> list[str]:
    """Union of two model lists, fetched first, without duplicates."""
    return list(dict.fromkeys([*fetched, *known]))


def correct_model_fields(settings: UserSettings, models: list[str]) -> UserSettings:
    """Point every model field that names an unknown model at ``models[0]``."""
    fixes = {
        name: models[0]
        for name in MODEL_FIELDS
        if getattr(settings, name) not in models
    }
    if not fixes:
        return settings
    logger.info("Resetting unavailable models to %s: %s", models[0], ", ".join(fixes))
    return replace(settings, **fixes)


class SettingsSynchronizer(QObject):
    """Keeps the settings record loaded, saved and consistent with the models list."""

    settings_changed = Signal(object)
    theme_changed = Signal(ThemeMode)
    available_models_changed = Signal(list)
    loaded_changed = Signal(bool)
    settings_saved = Signal()
    error_occurred = Signal(str)

    def __init__(
        self,
        store: Optional[UserSettingsStore] = None,
        model_service: Optional[ModelService] = None,
        localization: Optional[LocalizationContext] = None,
        prefers_dark: Optional[Callable[[], bool]] = None,
        theme_applier: Optional[Callable[[ThemeMode], object]] = None,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self._store = store or UserSettingsStore()
        self._model_service = model_service or ModelService()
        self.localization = localization or LocalizationContext(self)
        self._prefers_dark = prefers_dark or system_prefers_dark
        self._apply_theme = theme_applier or apply_theme

        self._settings = UserSettings()
        self._available_models: list[str] = list(DEFAULT_AVAILABLE_MODELS)
        self._loaded = False
        self._applied_theme: Optional[ThemeMode] = None
        self._workers: set[ModelListWorker] = set()

    @property
    def settings(self) -> UserSettings:
        """Get a copy of the current settings record."""
        return self._settings.copy()

    @property
    def available_models(self) -> list[str]:
        """Get the available model identifiers."""
        return self._available_models.copy()

    @property
    def is_loaded(self) -> bool:
        """Whether the initial load has completed."""
        return self._loaded

    def initialize(self) -> None:
        """Load stored settings, apply overrides and start synchronizing."""
        if self._loaded:
            logger.debug("Settings already initialized")
            return

        try:
            stored = self._store.load()
        except Exception:
            logger.exception("Failed to read stored settings, using defaults")
            stored = None

        initial = stored if stored is not None else UserSettings()
        if stored is None and self._prefers_dark():
            initial = replace(initial, theme=ThemeMode.DARK)
        initial = self._apply_environment(initial)

        self._settings = initial
        self.localization.set_language(initial.language)
        self._loaded = True
        logger.info("Settings loaded (stored record: %s)", stored is not None)

        self.loaded_changed.emit(True)
        self.settings_changed.emit(self.settings)
        self._on_settings_changed()
        self.refresh_available_models()

    @staticmethod
    def _apply_environment(settings: UserSettings) -> UserSettings:
        base_url = get_env_api_base_url()
        if base_url:
            settings = replace(settings, api_base_url=base_url)
        # Replaces any stored key list rather than extending it
        api_key = get_env_api_key()
        if api_key:
            settings = replace(settings, api_key=[api_key])
        return settings

    def set_settings(self, value: SettingsUpdate) -> bool:
        """
        Replace the settings record or update it from the current one.

        Args:
            value: A new record, or a callable receiving a copy of the current
                record and returning the next one

        Returns:
            True if the record changed
        """
        next_settings = value(self.settings) if callable(value) else value
        if not isinstance(next_settings, UserSettings):
            raise TypeError(
                f"Expected UserSettings, got {type(next_settings).__name__}"
            )
        return self._commit(next_settings)

    def update(self, **changes) -> bool:
        """Change individual fields, e.g. ``update(theme="dark")``."""
        unknown = set(changes) - set(UserSettings.field_names())
        if unknown:
            raise TypeError(f"Unknown settings fields: {', '.join(sorted(unknown))}")
        return self.set_settings(
            lambda current: UserSettings.from_mapping(changes, base=current)
        )

    def reset_to_defaults(self) -> bool:
        """Restore default settings, keeping environment overrides."""
        return self.set_settings(self._apply_environment(UserSettings()))

    def _commit(self, next_settings: UserSettings) -> bool:
        previous = self._settings
        if next_settings == previous:
            return False

        self._settings = next_settings.copy()
        self.settings_changed.emit(self.settings)

        if not self._loaded:
            return True

        self._on_settings_changed()
        if (
            previous.api_key != next_settings.api_key
            or previous.api_base_url != next_settings.api_base_url
        ):
            self.refresh_available_models()
        return True

    def _on_settings_changed(self) -> None:
        current = self._settings
        try:
            self._store.save(current)
            self.settings_saved.emit()
        except (sqlite3.Error, OSError) as exc:
            logger.error("Failed to save settings: %s", exc)
            self.error_occurred.emit(str(exc))

        self._apply_theme(current.theme)
        if self._applied_theme != current.theme:
            self._applied_theme = current.theme
            self.theme_changed.emit(current.theme)

        self.localization.set_language(current.language)

    def refresh_available_models(self) -> bool:
        """
        Fetch the models usable with the current API keys.

        Returns:
            True if a fetch was started
        """
        if not self._loaded or not self._settings.api_key:
            return False

        worker = ModelListWorker(
            self._model_service,
            self._settings.api_key,
            self._settings.api_base_url,
        )
        worker.models_fetched.connect(self._on_models_fetched)
        worker.failed.connect(self._on_models_failed)
        worker.finished.connect(self._reap_workers)
        self._workers.add(worker)
        worker.start()
        logger.debug("Started model listing with %d API key(s)", len(worker.api_keys))
        return True

    @Slot(object)
    def _on_models_fetched(self, models: Optional[list[str]]) -> None:
        if not models:
            logger.debug("Model listing returned nothing, keeping current models")
            return

        merged = merge_models(list(models), self._available_models)
        if merged != self._available_models:
            self._available_models = merged
            self.available_models_changed.emit(merged.copy())

        # Applied to the record current at completion time
        self.set_settings(lambda current: correct_model_fields(current, merged))

    @Slot(str)
    def _on_models_failed(self, message: str) -> None:
        # Listing failures keep the current models and stay out of the UI
        logger.debug("Keeping current models after listing failure: %s", message)

    @Slot()
    def _reap_workers(self) -> None:
        worker = self.sender()
        if worker not in self._workers:
            return
        self._workers.discard(worker)
        # finished fires just before the thread exits
        worker.wait()
        worker.deleteLater()

    def wait_for_pending(self, timeout_ms: int = 5000) -> bool:
        """Block until in-flight model listings finish."""
        finished = True
        for worker in list(self._workers):
            finished = worker.wait(timeout_ms) and finished
        return finished
