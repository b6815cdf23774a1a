"""Runtime configuration with local defaults.

A packager may ship a generated ``build_config.py`` next to this module to
override the defaults. When running from a source checkout, the values below
and the environment are used.
"""

from __future__ import annotations

import os


def _truthy_env(name: str, default: str = "0") -> bool:
    value = os.getenv(name, default)
    return value not in {"0", "false", "False"}


DEV_PROFILE_ENABLED: bool = _truthy_env("ALLIUM_DEV_PROFILE", "0")
LOG_LEVEL = os.getenv("ALLIUM_LOG_LEVEL", "INFO")

APP_ID = "org.example.Allium"
APP_NAME = "Allium"
APP_VERSION = "0.1.0"

NOTES_KEY = os.getenv("ALLIUM_NOTES_KEY", "notes")
ONBOARDING_KEY = "hasCompletedOnboarding"
ARCHIVE_NAME = "NotesArchive.zip"

try:  # pragma: no cover - optional override generated at build time
    from . import build_config as _generated  # type: ignore
except ImportError:  # pragma: no cover - development fallback
    _generated = None

if _generated:
    DEV_PROFILE_ENABLED = bool(getattr(_generated, "DEV_PROFILE_ENABLED", DEV_PROFILE_ENABLED))
    APP_ID = getattr(_generated, "APP_ID", APP_ID)
    APP_NAME = getattr(_generated, "APP_NAME", APP_NAME)
    APP_VERSION = getattr(_generated, "APP_VERSION", APP_VERSION)
    ARCHIVE_NAME = getattr(_generated, "ARCHIVE_NAME", ARCHIVE_NAME)
    LOG_LEVEL = getattr(_generated, "LOG_LEVEL", LOG_LEVEL)
