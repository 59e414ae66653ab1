"""OS color-scheme detection and application-wide theme switching."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication

from core.models import ThemeMode
from ui.styles import get_dark_theme_stylesheet, get_light_theme_stylesheet

logger = logging.getLogger(__name__)

DARK_MODE_PROPERTY = "darkMode"


def system_prefers_dark() -> bool:
    """Report whether the OS color scheme is dark."""
    app = QGuiApplication.instance()
    if app is None:
        return False
    try:
        return app.styleHints().colorScheme() == Qt.ColorScheme.Dark
    except AttributeError:
        # Qt < 6.5 has no color scheme hint
        return False


def apply_theme(theme: ThemeMode, app: Optional[QApplication] = None) -> bool:
    """
    Toggle the dark-mode indicator and stylesheet on the application.

    Returns:
        True if a running application was updated, False otherwise
    """
    app = app or QApplication.instance()
    if app is None:
        logger.debug("No application instance, skipping theme %s", theme.value)
        return False

    dark = theme == ThemeMode.DARK
    if app.property(DARK_MODE_PROPERTY) == dark:
        return True

    app.setProperty(DARK_MODE_PROPERTY, dark)
    if isinstance(app, QApplication):
        app.setStyleSheet(
            get_dark_theme_stylesheet() if dark else get_light_theme_stylesheet()
        )
    logger.debug("Applied %s theme", theme.value)
    return True
