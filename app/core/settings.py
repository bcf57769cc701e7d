# -*- coding: utf-8 -*-
"""
backend/app/core/settings.py

Fachada de configuración: reexpone `get_settings` de `app.shared.config`
tipado como BaseAppSettings.

Fecha: 2026-09-02
"""

from typing import cast

from app.shared.config.config_loader import get_settings as _get_settings
from app.shared.config.settings_base import BaseAppSettings


def get_settings() -> BaseAppSettings:
    return cast(BaseAppSettings, _get_settings())


__all__ = ["get_settings", "BaseAppSettings"]

# Fin del archivo backend/app/core/settings.py
