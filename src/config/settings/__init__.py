"""Agregador de settings do pyloto-buttons.

Re-exporta settings base e de botões.
"""

from __future__ import annotations

from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.buttons import (
    ButtonSettings,
    get_button_settings,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "BaseSettings",
    "ButtonSettings",
    "Environment",
    "get_base_settings",
    "get_button_settings",
]
