# -*- coding: utf-8 -*-
"""
backend/tests/modules/payments/test_payment_routes.py

Tests HTTP del módulo de pagos (/api/payments) y de PaymentService.

Fecha: 2026-09-02
"""

from decimal import Decimal

import pytest
from sqlalchemy import func, select

from app.modules.orders.models import Sale
from app.modules.payments.enums import PaymentStatus
from app.modules.payments.models import Payment
from app.modules.payments.schemas import CartItemIn, PaymentUpdateRequest
from app.modules.payments.services import PaymentService
from app.shared.errors import NotFoundError, ValidationError

from tests.helpers import ADMIN_ID, BUYER_ID

CART = {
    "items": [
        {"title": "A", "quantity": 2, "unit_price": 1000},
        {"title": "B", "quantity": 1, "unit_price": 500},
    ],
    "payer": {"email": "Buyer@Example.com"},
}


async def _seed_payment(session_factory, preference_id="pref-1", status="pending", user_id=BUYER_ID) -> str:
    async with session_factory() as db:
        payment = Payment(preference_id=preference_id, status=status, user_id=user_id, created_by=user_id)
        payment.set_items([{"title": "A", "quantity": 1, "unit_price": 1000.0, "currency_id": "CLP"}])
        db.add(payment)
        await db.commit()
        return payment.id


class TestCreatePreferenceRoute:
    """Tests para POST /api/payments/create-preference"""

    @pytest.mark.asyncio
    async def test_requires_authentication(self, async_client):
        """Test: sin token -> 401"""
        response = await async_client.post("/api/payments/create-preference", json=CART)
        assert response.status_code == 401
        assert response.json()["code"] == 401

    @pytest.mark.asyncio
    async def test_creates_preference(self, async_client, buyer_headers):
        """Test: usuario autenticado crea preferencia y Payment pending"""
        response = await async_client.post(
            "/api/payments/create-preference", json=CART, headers=buyer_headers
        )

        assert response.status_code == 201
        body = response.json()
        assert body["code"] == 201
        assert body["message"] == "Preferencia creada"
        data = body["data"]
        assert data["preference_id"] == "pref-1"
        assert data["redirect_url"].startswith("https://sandbox.mp.test")
        assert data["payment"]["status"] == "pending"
        assert data["payment"]["amount"] == 2500.0
        assert data["payment"]["items"][0] == {"title": "A", "quantity": 2, "unit_price": 1000.0, "currency_id": "CLP"}
        assert data["payment"]["user_id"] == BUYER_ID
        assert data["payment"]["payer_email"] == "buyer@example.com"

    @pytest.mark.asyncio
    async def test_empty_cart(self, async_client, buyer_headers):
        """Test: carrito vacío -> 400"""
        response = await async_client.post(
            "/api/payments/create-preference", json={"items": []}, headers=buyer_headers
        )
        assert response.status_code == 400
        assert response.json()["message"] == "items obligatorio"


class TestWebhookRoute:
    """Tests para POST /api/payments/webhook (siempre 200)"""

    @pytest.mark.asyncio
    async def test_approved_notification(self, async_client, session_factory, fake_gateway):
        """Test: notificación aprobada concilia y crea la venta"""
        await _seed_payment(session_factory)
        fake_gateway.add_payment("7001", status="approved")

        response = await async_client.post(
            "/api/payments/webhook?type=payment", json={"type": "payment", "data": {"id": "7001"}}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "OK"
        assert body["data"] == {"received": True, "outcome": "updated"}
        async with session_factory() as db:
            sales = (await db.execute(select(func.count()).select_from(Sale))).scalar_one()
        assert sales == 1

    @pytest.mark.asyncio
    async def test_non_json_body(self, async_client, fake_gateway):
        """Test: cuerpo no JSON igual responde 200"""
        response = await async_client.post(
            "/api/payments/webhook", content=b"not json", headers={"Content-Type": "text/plain"}
        )
        assert response.status_code == 200
        assert response.json()["data"]["received"] is True
        assert response.json()["message"] == "Sin paymentId"
        assert fake_gateway.payment_calls == []

    @pytest.mark.asyncio
    async def test_gateway_error_still_200(self, async_client):
        """Test: error de la pasarela -> 200 con outcome error"""
        response = await async_client.post("/api/payments/webhook", json={"data": {"id": "desconocido"}})
        assert response.status_code == 200
        assert response.json()["data"] == {"received": True, "outcome": "error"}

    @pytest.mark.asyncio
    async def test_unknown_preference_still_200(self, async_client, fake_gateway):
        """Test: preference sin Payment local -> 200 'Payment no encontrado'"""
        fake_gateway.add_payment("7002", preference_id="pref-x")
        response = await async_client.post("/api/payments/webhook", json={"data": {"id": "7002"}})
        assert response.status_code == 200
        assert response.json()["message"] == "Payment no encontrado"


class TestConfirmRoute:
    """Tests para GET /api/payments/confirm"""

    @pytest.mark.asyncio
    async def test_without_payment_id(self, async_client, fake_gateway):
        """Test: sin payment_id -> 400 sin llamar a la pasarela"""
        response = await async_client.get("/api/payments/confirm?status=approved")
        assert response.status_code == 400
        assert response.json()["message"] == "payment_id obligatorio"
        assert fake_gateway.payment_calls == []

    @pytest.mark.asyncio
    async def test_confirm_approved(self, async_client, session_factory, fake_gateway):
        """Test: retorno aprobado devuelve el Payment actualizado"""
        await _seed_payment(session_factory)
        fake_gateway.add_payment("7003", status="approved")

        response = await async_client.get("/api/payments/confirm?payment_id=7003&status=approved")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["outcome"] == "updated"
        assert data["status"] == "approved"
        assert data["payment"]["payment_id"] == "7003"


class TestAdminPaymentRoutes:
    """Tests para listado/detalle/actualización administrativa"""

    @pytest.mark.asyncio
    async def test_list_requires_admin(self, async_client, buyer_headers):
        """Test: buyer no puede listar pagos"""
        response = await async_client.get("/api/payments", headers=buyer_headers)
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_list_filters_by_status(self, async_client, session_factory, admin_headers):
        """Test: filtro por status"""
        await _seed_payment(session_factory, "pref-1", "pending")
        await _seed_payment(session_factory, "pref-2", "approved")

        response = await async_client.get("/api/payments?status=approved", headers=admin_headers)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["total"] == 1
        assert data["items"][0]["preference_id"] == "pref-2"
        assert data["has_more"] is False

    @pytest.mark.asyncio
    async def test_get_and_patch(self, async_client, session_factory, admin_headers):
        """Test: detalle y cambio de status por admin"""
        payment_id = await _seed_payment(session_factory)

        detail = await async_client.get(f"/api/payments/{payment_id}", headers=admin_headers)
        assert detail.status_code == 200
        assert detail.json()["data"]["preference_id"] == "pref-1"

        patched = await async_client.patch(
            f"/api/payments/{payment_id}", json={"status": "refunded"}, headers=admin_headers
        )
        assert patched.status_code == 200
        assert patched.json()["message"] == "Pago actualizado"
        assert patched.json()["data"]["status"] == "refunded"
        assert patched.json()["data"]["updated_by"] == ADMIN_ID

    @pytest.mark.asyncio
    async def test_get_invalid_id(self, async_client, admin_headers):
        """Test: id mal formado -> 400"""
        response = await async_client.get("/api/payments/xyz", headers=admin_headers)
        assert response.status_code == 400


class TestPaymentService:
    """Tests unitarios de PaymentService"""

    @pytest.mark.asyncio
    async def test_update_items_recomputes_amount(self, db_session, session_factory):
        """Test: cambiar ítems recalcula amount y currency_id"""
        payment_id = await _seed_payment(session_factory)
        service = PaymentService(db_session)

        updated = await service.update_by_id(
            payment_id,
            PaymentUpdateRequest(items=[CartItemIn(title="C", quantity=3, unit_price=200, currency_id="USD")]),
            updated_by=ADMIN_ID,
        )

        assert updated.amount == Decimal("600")
        assert updated.currency_id == "USD"
        assert updated.preference_id == "pref-1"
        assert updated.created_by == BUYER_ID

    @pytest.mark.asyncio
    async def test_update_nothing(self, db_session, session_factory):
        """Test: sin cambios -> ValidationError"""
        payment_id = await _seed_payment(session_factory)
        with pytest.raises(ValidationError, match="Nada para actualizar"):
            await PaymentService(db_session).update_by_id(payment_id, PaymentUpdateRequest(), ADMIN_ID)

    @pytest.mark.asyncio
    async def test_get_missing(self, db_session):
        """Test: UUID inexistente -> NotFoundError"""
        with pytest.raises(NotFoundError):
            await PaymentService(db_session).get_by_id("00000000-0000-4000-8000-0000000000ff")

    @pytest.mark.asyncio
    async def test_list_paginates(self, db_session, session_factory):
        """Test: page/limit y has_more"""
        for i in range(3):
            await _seed_payment(session_factory, f"pref-{i}", PaymentStatus.pending.value)

        result = await PaymentService(db_session).list(page=1, limit=2)

        assert result["total"] == 3
        assert len(result["items"]) == 2
        assert result["has_more"] is True
