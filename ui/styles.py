"""Theme styles for the application."""

# Color Tokens
COLORS = {
    "primary": "#1a73e8",
    "primary_hover": "rgba(26, 115, 232, 0.35)",

    "dark": {
        "background": "#131314",
        "surface": "#1e1f20",
        "border": "#3c4043",
        "text_primary": "#e3e3e3",
        "text_muted": "#9aa0a6",
    },

    "light": {
        "background": "#FFFFFF",
        "surface": "#F0F4F9",
        "border": "#DADCE0",
        "text_primary": "#1F1F1F",
        "text_muted": "#5F6368",
    },
}

FONTS = {
    "body": "'Google Sans', 'Segoe UI', sans-serif",
}


def _build_stylesheet(c: dict[str, str]) -> str:
    p = COLORS
    return f"""
    QWidget {{
        background-color: {c['background']};
        color: {c['text_primary']};
        font-family: {FONTS['body']};
        font-size: 14px;
    }}

    QLineEdit, QTextEdit, QPlainTextEdit, QComboBox {{
        background-color: {c['surface']};
        border: 1px solid {c['border']};
        border-radius: 8px;
        padding: 6px 10px;
    }}

    QLineEdit:focus, QTextEdit:focus, QComboBox:focus {{
        border: 1px solid {p['primary']};
    }}

    QPushButton {{
        background-color: {c['surface']};
        border: 1px solid {c['border']};
        border-radius: 16px;
        padding: 6px 14px;
    }}

    QPushButton:hover {{
        background-color: {p['primary_hover']};
    }}

    QLabel[muted="true"] {{
        color: {c['text_muted']};
    }}
    """


def get_dark_theme_stylesheet() -> str:
    """Get the dark theme QSS stylesheet."""
    return _build_stylesheet(COLORS["dark"])


def get_light_theme_stylesheet() -> str:
    """Get the light theme QSS stylesheet."""
    return _build_stylesheet(COLORS["light"])
