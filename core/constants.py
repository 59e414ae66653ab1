"""
Constants for Gemini Desk.
"""


# ----- Models -----

# Default model for every model-selection setting
DEFAULT_MODEL = "gemini-1.0-pro"

# Seed for the available-models list before the remote listing answers
DEFAULT_AVAILABLE_MODELS = [
    "gemini-1.0-pro",
    "gemini-1.5-flash",
]

# Endpoint used when the api_base_url setting is empty
DEFAULT_API_BASE_URL = "https://generativelanguage.googleapis.com"

# Generation method a listed model must support to be selectable
GENERATE_CONTENT_METHOD = "generateContent"


# ----- Localization -----

DEFAULT_LANGUAGE = "en"

SUPPORTED_LANGUAGES = [
    "en",
    "zh-CN",
    "zh-TW",
    "ja",
    "ko",
    "fr",
    "de",
    "es",
    "ru",
]


# ----- Storage -----

APP_DIR_NAME = ".gemini_desk"
SETTINGS_CATEGORY = "user"
SETTINGS_KEY_PREFIX = "user."
