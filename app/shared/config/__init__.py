# -*- coding: utf-8 -*-
"""
backend/app/shared/config/__init__.py

Entry-point ligero para configuración.

Expone un único import estable:
    from app.shared.config import get_settings

No inicializa settings en import-time para evitar efectos colaterales
durante la recolección de tests.
"""

from app.shared.config.config_loader import get_settings
from app.shared.config.settings_base import BaseAppSettings

__all__ = ["get_settings", "BaseAppSettings"]

# Fin del archivo backend/app/shared/config/__init__.py
