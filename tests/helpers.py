# -*- coding: utf-8 -*-
"""
backend/tests/helpers.py

Utilidades compartidas por los tests: pasarela falsa, ids fijos y tokens por rol.

Fecha: 2026-09-02
"""

from typing import Any, Optional

from app.modules.auth.enums import UserRole
from app.modules.auth.schemas import TokenClaims
from app.modules.auth.security import issue_user_token
from app.shared.database.base import new_uuid
from app.shared.errors import UpstreamError

ADMIN_ID = "00000000-0000-4000-8000-000000000001"
BUYER_ID = "00000000-0000-4000-8000-000000000002"
OTHER_BUYER_ID = "00000000-0000-4000-8000-000000000003"


class FakeGateway:
    """
    GatewayClient en memoria.

    - create_preference devuelve `preference_response` y registra el body.
    - get_payment devuelve el pago registrado en `payments[charge_id]`
      o lanza UpstreamError si no existe.
    """

    def __init__(self) -> None:
        self.preference_response: dict[str, Any] = {
            "id": "pref-1",
            "init_point": "https://mp.test/checkout?pref_id=pref-1",
            "sandbox_init_point": "https://sandbox.mp.test/checkout?pref_id=pref-1",
        }
        self.payments: dict[str, dict[str, Any]] = {}
        self.preference_calls: list[dict[str, Any]] = []
        self.payment_calls: list[str] = []

    def add_payment(
        self,
        charge_id: str,
        preference_id: Optional[str] = "pref-1",
        status: str = "approved",
        payer_email: Optional[str] = "Buyer@Example.com",
        **extra: Any,
    ) -> dict[str, Any]:
        payment: dict[str, Any] = {"id": charge_id, "status": status, **extra}
        if preference_id is not None:
            payment["preference_id"] = preference_id
        if payer_email is not None:
            payment["payer"] = {"email": payer_email}
        self.payments[charge_id] = payment
        return payment

    async def create_preference(self, body):
        self.preference_calls.append(dict(body))
        return dict(self.preference_response)

    async def get_payment(self, charge_id: str):
        self.payment_calls.append(charge_id)
        if charge_id not in self.payments:
            raise UpstreamError(f"Pasarela respondió 404 ({charge_id})")
        return dict(self.payments[charge_id])


def make_token(role: UserRole, user_id: Optional[str] = None, email: Optional[str] = None) -> str:
    uid = user_id or new_uuid()
    claims = TokenClaims(id=uid, email=email or f"{role.value}@example.com", role=role)
    return issue_user_token(claims)


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
