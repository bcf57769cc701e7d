# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/facades/checkout/items.py

Normalización de ítems de carrito antes de enviarlos a la pasarela o
guardarlos en un Payment.

Reglas por ítem:
- title:       texto no vacío o "Item"
- quantity:    número >= 1 (no numérico, 0 o negativo -> 1; las fracciones se conservan)
- unit_price:  número >= 0 (no numérico o negativo -> 0)
- currency_id: el indicado tal cual o la moneda por defecto (CLP)

Fecha: 2026-09-02
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Mapping

from pydantic import BaseModel

DEFAULT_TITLE = "Item"


def to_number(value: Any) -> float:
    """float finito o 0.0."""
    if isinstance(value, bool):
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def normalize_item(raw: Any, default_currency: str = "CLP") -> dict[str, Any]:
    data: Mapping[str, Any]
    if isinstance(raw, BaseModel):
        data = raw.model_dump()
    elif isinstance(raw, Mapping):
        data = raw
    else:
        data = {}

    title = str(data.get("title") or "").strip() or DEFAULT_TITLE
    quantity = max(1.0, to_number(data.get("quantity")))
    unit_price = max(0.0, to_number(data.get("unit_price")))
    currency = str(data.get("currency_id") or "").strip() or default_currency

    return {
        "title": title,
        # Cantidades enteras se guardan como int
        "quantity": int(quantity) if quantity.is_integer() else quantity,
        "unit_price": unit_price,
        "currency_id": currency,
    }


def normalize_items(items: Iterable[Any], default_currency: str = "CLP") -> list[dict[str, Any]]:
    return [normalize_item(it, default_currency) for it in items]


__all__ = ["normalize_item", "normalize_items", "to_number", "DEFAULT_TITLE"]
