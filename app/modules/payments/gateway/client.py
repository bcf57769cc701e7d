# -*- coding: utf-8 -*-
"""
backend/app/modules/payments/gateway/client.py

Cliente HTTP async de la pasarela (API REST de MercadoPago) sobre httpx.

Operaciones:
- create_preference(body):  POST {base}/checkout/preferences
- get_payment(charge_id):   GET  {base}/v1/payments/{charge_id}

Ambas autentican con `Authorization: Bearer <access_token>` y respetan el
timeout de PaymentsConfig. Cualquier fallo de red, status no-2xx o cuerpo
no-JSON se traduce a UpstreamError; no hay reintentos.

Los tests inyectan un `httpx.MockTransport` o un GatewayClient falso.

Fecha: 2026-09-02
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Protocol
from urllib.parse import quote

import httpx

from app.modules.payments.config import PaymentsConfig
from app.shared.errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)


class GatewayClient(Protocol):
    async def create_preference(self, body: Mapping[str, Any]) -> dict[str, Any]: ...

    async def get_payment(self, charge_id: str) -> dict[str, Any]: ...


class MercadoPagoClient:
    """Implementación de GatewayClient contra la API REST de MercadoPago."""

    def __init__(
        self,
        config: PaymentsConfig,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._config = config
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        if not self._config.access_token:
            raise ConfigurationError("Config inválida: MP_ACCESS_TOKEN no definido")
        return httpx.AsyncClient(
            base_url=self._config.api_base_url,
            timeout=httpx.Timeout(self._config.timeout_sec),
            headers={
                "Authorization": f"Bearer {self._config.access_token}",
                "Content-Type": "application/json",
            },
            transport=self._transport,
        )

    async def _request(self, method: str, url: str, **kwargs: Any) -> dict[str, Any]:
        try:
            async with self._client() as client:
                response = await client.request(method, url, **kwargs)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "[MP] %s %s status=%s body=%s",
                method, url, e.response.status_code, e.response.text[:500],
            )
            raise UpstreamError(f"Pasarela respondió {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error("[MP] %s %s error=%s", method, url, e)
            raise UpstreamError("No se pudo contactar la pasarela de pago") from e
        except ValueError as e:
            logger.error("[MP] %s %s respuesta no JSON", method, url)
            raise UpstreamError("Respuesta inválida de la pasarela de pago") from e

        if not isinstance(data, dict):
            raise UpstreamError("Respuesta inválida de la pasarela de pago")
        return data

    async def create_preference(self, body: Mapping[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/checkout/preferences", json=dict(body))

    async def get_payment(self, charge_id: str) -> dict[str, Any]:
        return await self._request("GET", f"/v1/payments/{quote(str(charge_id), safe='')}")


__all__ = ["GatewayClient", "MercadoPagoClient"]
