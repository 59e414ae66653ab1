"""ViewModels package for the Gemini Desk UI."""

from ui.viewmodels.settings.settings_synchronizer import SettingsSynchronizer

__all__ = [
    "SettingsSynchronizer",
]
