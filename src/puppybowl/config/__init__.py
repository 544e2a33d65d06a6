"""Configuration helpers for the roster client."""

from .settings import DEFAULT_API_URL, Settings

__all__ = [
    "DEFAULT_API_URL",
    "Settings",
]
