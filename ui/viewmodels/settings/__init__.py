"""Settings subsystem - user settings synchronization."""

from .model_list_worker import ModelListWorker
from .settings_synchronizer import (
    SettingsSynchronizer,
    correct_model_fields,
    merge_models,
)

__all__ = [
    "ModelListWorker",
    "SettingsSynchronizer",
    "correct_model_fields",
    "merge_models",
]
