"""Allium notes core package."""

from __future__ import annotations

from .config import APP_VERSION

__all__ = ["__version__"]

__version__ = APP_VERSION
