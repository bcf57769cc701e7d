# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/validators.py

Validadores comunes: UUID de actor/entidad y URLs absolutas.

Fecha: 2026-09-02
"""

from typing import Any
from urllib.parse import urlparse
from uuid import UUID


def is_uuid(value: Any) -> bool:
    """True si `value` es un UUID en texto (con o sin guiones)."""
    if not value or not isinstance(value, str):
        return False
    try:
        UUID(value)
    except ValueError:
        return False
    return True


def ensure_url(value: Any) -> str | None:
    """
    Devuelve la URL sin "/" finales si es absoluta http/https; None en otro caso.

    >>> ensure_url("https://shop.example.com/")
    'https://shop.example.com'
    """
    if not value or not isinstance(value, str):
        return None
    candidate = value.strip().rstrip("/")
    parsed = urlparse(candidate)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return None
    return candidate


__all__ = ["is_uuid", "ensure_url"]
