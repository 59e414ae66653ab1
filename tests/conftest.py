"""Shared pytest setup."""

import os

# Qt tests must run without a display server
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
