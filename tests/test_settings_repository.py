"""Tests for the settings repository."""

from pathlib import Path

from core.persistence import Database
from core.persistence.settings_repository import SettingsRepository


def test_get_by_category_is_scoped_and_ordered(tmp_path: Path) -> None:
    db = Database(tmp_path / "settings.db")
    repo = SettingsRepository(db)

    repo.replace_category("alpha", {"alpha.two": "2", "alpha.one": "1"})
    repo.replace_category("beta", {"beta.one": "3"})

    alpha_settings = repo.get_by_category("alpha")
    assert [setting.key for setting in alpha_settings] == ["alpha.one", "alpha.two"]
    assert [setting.value for setting in alpha_settings] == ["1", "2"]
    assert all(setting.category == "alpha" for setting in alpha_settings)
    assert repo.get_by_category("missing") == []


def test_replace_category_overwrites_rows(tmp_path: Path) -> None:
    db = Database(tmp_path / "settings.db")
    repo = SettingsRepository(db)

    repo.replace_category("user", {"user.stale": "1"})
    repo.replace_category("other", {"other.keep": "2"})

    repo.replace_category("user", {"user.a": "x", "user.b": "y"})

    assert [s.key for s in repo.get_by_category("user")] == ["user.a", "user.b"]
    assert [s.value for s in repo.get_by_category("other")] == ["2"]


def test_delete_category_reports_removed_rows(tmp_path: Path) -> None:
    db = Database(tmp_path / "settings.db")
    repo = SettingsRepository(db)
    repo.replace_category("user", {"user.a": "x", "user.b": "y"})
    repo.replace_category("other", {"other.keep": "2"})

    assert repo.delete_category("user") == 2
    assert repo.get_by_category("user") == []
    assert repo.delete_category("user") == 0
    assert len(repo.get_by_category("other")) == 1
