# -*- coding: utf-8 -*-
"""
backend/app/shared/config/config_loader.py

Selección de settings por PYTHON_ENV:
- production -> ProdSettings
- test       -> EnvTestingSettings
- otro valor -> DevSettings

La instancia se valida una vez y se cachea. Los tests que cambian el
entorno llaman get_settings.cache_clear().

Fecha: 2026-09-02
"""

import os
from functools import lru_cache

from .settings_base import BaseAppSettings
from .settings_dev import DevSettings
from .settings_prod import ProdSettings
from .settings_testing import EnvTestingSettings

_BY_ENV: dict[str, type[BaseAppSettings]] = {
    "production": ProdSettings,
    "test": EnvTestingSettings,
}


@lru_cache(maxsize=1)
def get_settings() -> BaseAppSettings:
    env = os.getenv("PYTHON_ENV", "development").strip().lower()
    settings = _BY_ENV.get(env, DevSettings)()
    # ValueError si la configuración productiva es insegura
    settings._security_checks()
    return settings


__all__ = ["get_settings"]
# Fin del archivo backend/app/shared/config/config_loader.py
