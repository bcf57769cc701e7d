# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/slug_utils.py

Generación de slugs para tipos y categorías del catálogo.

Fecha: 2026-09-02
"""

import re
import unicodedata


def slugify(value: str) -> str:
    """
    "Electrónica  & Hogar" -> "electronica-hogar"

    Quita acentos, descarta símbolos y colapsa separadores en guiones.
    """
    value = unicodedata.normalize("NFKD", value or "").encode("ascii", "ignore").decode("ascii")
    value = re.sub(r"[^\w\s-]", "", value).strip().lower()
    value = re.sub(r"[-\s_]+", "-", value)
    return value.strip("-")


__all__ = ["slugify"]
