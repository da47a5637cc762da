"""Config package - Settings loaded from environment."""

from .settings import Settings, settings

__all__ = [
    'Settings',
    'settings'
]
