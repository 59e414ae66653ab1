"""Tests for LocalizationContext."""

import pytest

from core.localization import LocalizationContext, normalize_language


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        ("en", "en"),
        ("zh_cn", "zh-CN"),
        ("ZH-tw", "zh-TW"),
        ("fr-CA", "fr"),
        ("EN_us", "en"),
        ("xx", "en"),
        ("", "en"),
        (None, "en"),
    ],
)
def test_normalize_language(code, expected):
    assert normalize_language(code) == expected


def test_set_language_emits_on_change(qtbot):
    context = LocalizationContext()

    with qtbot.waitSignal(context.language_changed) as blocker:
        context.set_language("ja")

    assert blocker.args[0] == "ja"
    assert context.language == "ja"


def test_set_same_language_is_silent(qtbot):
    context = LocalizationContext()

    with qtbot.assertNotEmitted(context.language_changed):
        context.set_language("en")
        context.set_language("unknown")
