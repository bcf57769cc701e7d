# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/routes/payments.py

Rutas de pagos (/payments).

Endpoints:
- POST  /payments/create-preference   (usuario autenticado)
- POST  /payments/webhook             (pasarela; SIEMPRE responde 200)
- GET   /payments/confirm             (retorno del pagador; ?payment_id=)
- GET   /payments                     (admin)
- GET   /payments/{id}                (admin)
- PATCH /payments/{id}                (admin)

Fecha: 2026-09-02
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, Query, Request

from app.modules.auth.dependencies import get_current_user, require_admin
from app.modules.auth.schemas import TokenClaims
from app.modules.payments.dependencies import (
    get_payment_service,
    get_preference_creator,
    get_reconciler,
)
from app.modules.payments.facades.checkout import PreferenceCreator
from app.modules.payments.facades.webhooks import Reconciler, ReconcileResult, webhook_ack
from app.modules.payments.schemas import (
    CreatePreferenceRequest,
    PaymentOut,
    PaymentUpdateRequest,
    PreferenceOut,
)
from app.modules.payments.services import PaymentService
from app.shared.utils.api_response import created, ok

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/payments", tags=["payments"])


def _reconcile_data(result: ReconcileResult) -> dict[str, Any]:
    return {
        "outcome": result.outcome.value,
        "status": result.status,
        "payment": PaymentOut.model_validate(result.payment) if result.payment else None,
    }


@router.post("/create-preference")
async def create_preference(
    payload: CreatePreferenceRequest,
    user: TokenClaims = Depends(get_current_user),
    creator: PreferenceCreator = Depends(get_preference_creator),
):
    result = await creator.create_preference(
        payload.items,
        created_by=user.id,
        payer=payload.payer.model_dump(exclude_none=True) if payload.payer else None,
    )
    data = PreferenceOut(
        preference_id=result.preference_id,
        redirect_url=result.redirect_url,
        payment=PaymentOut.model_validate(result.payment),
    )
    return created(data, message="Preferencia creada")


@router.post("/webhook")
async def webhook(request: Request, reconciler: Reconciler = Depends(get_reconciler)):
    try:
        body = await request.json()
    except ValueError:
        body = None
    result = await reconciler.process_webhook(body, dict(request.query_params))
    return ok(webhook_ack(result), message=result.message)


@router.get("/confirm")
async def confirm(request: Request, reconciler: Reconciler = Depends(get_reconciler)):
    result = await reconciler.confirm_from_return(dict(request.query_params))
    return ok(_reconcile_data(result), message=result.message)


@router.get("")
async def list_payments(
    status: Optional[str] = Query(None),
    user: Optional[str] = Query(None),
    page: Optional[int] = Query(None, ge=1),
    limit: Optional[int] = Query(None, ge=1, le=100),
    _: TokenClaims = Depends(require_admin),
    service: PaymentService = Depends(get_payment_service),
):
    return ok(await service.list(status=status, user_id=user, page=page, limit=limit))


@router.get("/{id}")
async def get_payment(
    id: str,
    _: TokenClaims = Depends(require_admin),
    service: PaymentService = Depends(get_payment_service),
):
    return ok(await service.get_by_id(id))


@router.patch("/{id}")
async def update_payment(
    id: str,
    payload: PaymentUpdateRequest,
    admin: TokenClaims = Depends(require_admin),
    service: PaymentService = Depends(get_payment_service),
):
    return ok(await service.update_by_id(id, payload, updated_by=admin.id), message="Pago actualizado")
