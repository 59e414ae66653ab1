"""Tests for the UserSettings record."""

import pytest

from core.models import MODEL_FIELDS, ThemeMode, UserSettings


def test_defaults_cover_every_field() -> None:
    settings = UserSettings()
    data = settings.to_mapping()

    assert set(data) == set(UserSettings.field_names())
    assert data["theme"] == "light"
    assert data["language"] == "en"
    assert data["api_key"] == []
    assert data["show_thoughts"] is True
    assert data["auto_title_generation"] is True
    assert data["api_base_url"] == ""
    for name in MODEL_FIELDS:
        assert data[name] == "gemini-1.0-pro"


def test_from_mapping_layers_over_defaults() -> None:
    settings = UserSettings.from_mapping(
        {"theme": "dark", "think_deeper": True, "unknown": 1}
    )

    assert settings.theme == ThemeMode.DARK
    assert settings.think_deeper is True
    assert settings.language == "en"
    assert not hasattr(settings, "unknown")


def test_from_mapping_coerces_textual_values() -> None:
    settings = UserSettings.from_mapping(
        {
            "show_suggestions": "yes",
            "default_search": "0",
            "api_key": '["a", "b"]',
            "theme": "DARK",
        }
    )

    assert settings.show_suggestions is True
    assert settings.default_search is False
    assert settings.api_key == ["a", "b"]
    assert settings.theme == ThemeMode.DARK


def test_single_key_string_becomes_list() -> None:
    assert UserSettings.from_mapping({"api_key": "solo"}).api_key == ["solo"]
    assert UserSettings.from_mapping({"api_key": ""}).api_key == []


@pytest.mark.parametrize(
    "values",
    [
        {"theme": "sepia"},
        {"show_thoughts": "maybe"},
        {"language": 42},
        {"api_key": {"key": "value"}},
    ],
)
def test_from_mapping_rejects_malformed_values(values) -> None:
    with pytest.raises(ValueError):
        UserSettings.from_mapping(values)


def test_copy_is_independent() -> None:
    original = UserSettings(api_key=["a"])
    clone = original.copy()
    clone.api_key.append("b")

    assert original.api_key == ["a"]
    assert clone == UserSettings(api_key=["a", "b"])
