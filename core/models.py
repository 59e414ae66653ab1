"""Domain models for persisted user settings."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional

from core.constants import DEFAULT_LANGUAGE, DEFAULT_MODEL


class ThemeMode(str, Enum):
    """Theme mode for the application."""

    LIGHT = "light"
    DARK = "dark"


@dataclass
class Setting:
    """A configuration setting."""

    key: str
    value: str
    category: str
    updated_at: datetime = field(default_factory=datetime.now)


# Fields that must name a model from the available-models list.
MODEL_FIELDS = (
    "default_model",
    "suggestion_model",
    "title_generation_model",
    "language_detection_model",
)

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    raise ValueError(f"Not a boolean: {value!r}")


def _coerce_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    raise ValueError(f"Not a string: {value!r}")


def _coerce_key_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        stripped = value.strip()
        if stripped.startswith("["):
            return _coerce_key_list(json.loads(stripped))
        return [stripped] if stripped else []
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    raise ValueError(f"Not a key list: {value!r}")


@dataclass
class UserSettings:
    """The full set of user-configurable preferences."""

    theme: ThemeMode = ThemeMode.LIGHT
    language: str = DEFAULT_LANGUAGE
    api_key: list[str] = field(default_factory=list)
    show_suggestions: bool = False
    default_model: str = DEFAULT_MODEL
    suggestion_model: str = DEFAULT_MODEL
    auto_title_generation: bool = True
    title_generation_model: str = DEFAULT_MODEL
    language_detection_model: str = DEFAULT_MODEL
    default_search: bool = False
    use_search_optimizer_prompt: bool = False
    show_thoughts: bool = True
    enable_global_system_prompt: bool = False
    global_system_prompt: str = ""
    optimize_formatting: bool = False
    think_deeper: bool = False
    api_base_url: str = ""

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Names of every recognized settings field, in declaration order."""
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_mapping(
        cls,
        values: Mapping[str, Any],
        base: Optional["UserSettings"] = None,
    ) -> "UserSettings":
        """
        Build a record from a partial mapping layered over ``base``.

        Unknown keys are ignored. Missing keys keep the value from ``base``
        (the defaults when omitted).

        Raises:
            ValueError: If a recognized field holds a value of the wrong type.
        """
        record = base.copy() if base is not None else cls()
        changes: dict[str, Any] = {}
        for name in cls.field_names():
            if name not in values:
                continue
            changes[name] = _coerce_field(name, values[name])
        return replace(record, **changes)

    def to_mapping(self) -> dict[str, Any]:
        """Plain JSON-compatible mapping of every field."""
        data: dict[str, Any] = {}
        for name in self.field_names():
            value = getattr(self, name)
            if isinstance(value, ThemeMode):
                value = value.value
            elif isinstance(value, list):
                value = list(value)
            data[name] = value
        return data

    def copy(self) -> "UserSettings":
        """Return an independent copy of this record."""
        return replace(self, api_key=list(self.api_key))


_BOOL_FIELDS = frozenset(
    f.name for f in fields(UserSettings) if f.type in ("bool", bool)
)


def _coerce_field(name: str, value: Any) -> Any:
    if name == "theme":
        return value if isinstance(value, ThemeMode) else ThemeMode(str(value).lower())
    if name == "api_key":
        return _coerce_key_list(value)
    if name in _BOOL_FIELDS:
        return _coerce_bool(value)
    return _coerce_str(value)
