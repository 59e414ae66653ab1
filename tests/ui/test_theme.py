"""Tests for theme detection and application."""

from core.models import ThemeMode
from ui.styles import COLORS
from ui.theme import DARK_MODE_PROPERTY, apply_theme, system_prefers_dark


def test_apply_theme_toggles_dark_mode(qapp):
    assert apply_theme(ThemeMode.DARK, qapp) is True
    assert qapp.property(DARK_MODE_PROPERTY) is True
    assert COLORS["dark"]["background"] in qapp.styleSheet()

    assert apply_theme(ThemeMode.LIGHT, qapp) is True
    assert qapp.property(DARK_MODE_PROPERTY) is False
    assert COLORS["light"]["background"] in qapp.styleSheet()


def test_system_prefers_dark_returns_bool(qapp):
    assert isinstance(system_prefers_dark(), bool)
