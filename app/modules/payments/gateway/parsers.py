# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/gateway/parsers.py

Parsers explícitos de respuestas y notificaciones de la pasarela.

La pasarela (y sus SDKs) no siempre devuelven los campos en el mismo
lugar; cada parser prueba una lista fija de ubicaciones, en orden, y
devuelve el primer valor no vacío como texto:

- preference id (respuesta de preferencia):   id -> body.id -> response.id
- URL de redirección (respuesta de preferencia):
      sandbox_init_point (solo en sandbox) -> init_point
      -> body.init_point -> response.init_point
- id de cobro (webhook):                       query["data.id"] -> body.data.id -> body.id
- preference id (pago de la pasarela):         preference_id -> order.id -> metadata.preference_id
- topic (webhook, solo para logs):             query.topic -> query.type -> body.type

Ningún parser lanza excepciones: entradas con forma inesperada devuelven None.

Fecha: 2026-09-02
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

Path = Sequence[str]

PREFERENCE_ID_PATHS: tuple[Path, ...] = (("id",), ("body", "id"), ("response", "id"))
REDIRECT_URL_PATHS: tuple[Path, ...] = (
    ("init_point",),
    ("body", "init_point"),
    ("response", "init_point"),
)
SANDBOX_REDIRECT_PATH: Path = ("sandbox_init_point",)
WEBHOOK_BODY_CHARGE_PATHS: tuple[Path, ...] = (("data", "id"), ("id",))
PAYMENT_PREFERENCE_PATHS: tuple[Path, ...] = (
    ("preference_id",),
    ("order", "id"),
    ("metadata", "preference_id"),
)


def dig(obj: Any, path: Path) -> Any:
    """Recorre claves anidadas; None si algún tramo no es un mapping."""
    current = obj
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


def _as_text(value: Any) -> Optional[str]:
    if value is None or isinstance(value, (Mapping, list, tuple, bool)):
        return None
    text = str(value).strip()
    return text or None


def first_text(obj: Any, paths: Sequence[Path]) -> Optional[str]:
    for path in paths:
        value = _as_text(dig(obj, path))
        if value is not None:
            return value
    return None


# ----------------------------------------------------------------------
# Respuesta de creación de preferencia
# ----------------------------------------------------------------------

def parse_preference_id(response: Any) -> Optional[str]:
    return first_text(response, PREFERENCE_ID_PATHS)


def parse_redirect_url(response: Any, *, sandbox: bool) -> Optional[str]:
    paths = ((SANDBOX_REDIRECT_PATH,) if sandbox else ()) + REDIRECT_URL_PATHS
    return first_text(response, paths)


# ----------------------------------------------------------------------
# Notificación (webhook) y pago de la pasarela
# ----------------------------------------------------------------------

def parse_charge_id(body: Any, query: Optional[Mapping[str, Any]] = None) -> Optional[str]:
    from_query = _as_text(query.get("data.id")) if isinstance(query, Mapping) else None
    return from_query or first_text(body, WEBHOOK_BODY_CHARGE_PATHS)


def parse_topic(body: Any, query: Optional[Mapping[str, Any]] = None) -> Optional[str]:
    if isinstance(query, Mapping):
        topic = _as_text(query.get("topic")) or _as_text(query.get("type"))
        if topic:
            return topic
    return _as_text(dig(body, ("type",)))


def parse_payment_preference_id(gateway_payment: Any) -> Optional[str]:
    return first_text(gateway_payment, PAYMENT_PREFERENCE_PATHS)


def parse_payer_email(gateway_payment: Any) -> Optional[str]:
    email = _as_text(dig(gateway_payment, ("payer", "email")))
    return email.lower() if email else None


__all__ = [
    "dig",
    "first_text",
    "parse_preference_id",
    "parse_redirect_url",
    "parse_charge_id",
    "parse_topic",
    "parse_payment_preference_id",
    "parse_payer_email",
]
