# -*- coding: utf-8 -*-
"""
backend/tests/modules/payments/test_payment_parsers.py

Tests de los parsers de respuestas/notificaciones de la pasarela y de la
normalización de ítems del carrito.

Fecha: 2026-09-02
"""

import pytest

from app.modules.payments.facades.checkout.items import normalize_item, normalize_items, to_number
from app.modules.payments.gateway import (
    parse_charge_id,
    parse_payer_email,
    parse_payment_preference_id,
    parse_preference_id,
    parse_redirect_url,
    parse_topic,
)


class TestPreferenceResponseParsers:
    """Tests para id de preferencia y URL de redirección"""

    def test_preference_id_top_level_first(self):
        """Test: el id de primer nivel tiene prioridad"""
        resp = {"id": "pref-top", "body": {"id": "pref-body"}}
        assert parse_preference_id(resp) == "pref-top"

    def test_preference_id_falls_back_to_body_then_response(self):
        """Test: body.id y luego response.id"""
        assert parse_preference_id({"body": {"id": "pref-body"}}) == "pref-body"
        assert parse_preference_id({"response": {"id": 123}}) == "123"

    def test_preference_id_missing(self):
        """Test: respuesta sin id devuelve None"""
        assert parse_preference_id({}) is None
        assert parse_preference_id(None) is None
        assert parse_preference_id("not-a-dict") is None

    def test_redirect_prefers_sandbox_in_sandbox_mode(self):
        """Test: sandbox_init_point solo se usa en sandbox"""
        resp = {"init_point": "https://live", "sandbox_init_point": "https://sandbox"}
        assert parse_redirect_url(resp, sandbox=True) == "https://sandbox"
        assert parse_redirect_url(resp, sandbox=False) == "https://live"

    def test_redirect_nested_fallbacks(self):
        """Test: body.init_point y response.init_point como respaldo"""
        assert parse_redirect_url({"body": {"init_point": "https://b"}}, sandbox=False) == "https://b"
        assert parse_redirect_url({"response": {"init_point": "https://r"}}, sandbox=True) == "https://r"

    def test_redirect_ignores_empty_strings(self):
        """Test: valores vacíos no cuentan como presentes"""
        resp = {"sandbox_init_point": "  ", "init_point": "https://live"}
        assert parse_redirect_url(resp, sandbox=True) == "https://live"


class TestWebhookParsers:
    """Tests para id de cobro, topic y datos del pago de la pasarela"""

    def test_charge_id_from_query_has_priority(self):
        """Test: query['data.id'] gana sobre el body"""
        assert parse_charge_id({"data": {"id": "body-1"}}, {"data.id": "query-1"}) == "query-1"

    def test_charge_id_from_body(self):
        """Test: body.data.id y luego body.id"""
        assert parse_charge_id({"data": {"id": 987}}) == "987"
        assert parse_charge_id({"id": "555"}, {}) == "555"

    @pytest.mark.parametrize("body", [None, {}, [], "texto", {"data": "x"}, {"data": {"id": None}}])
    def test_charge_id_absent_never_raises(self, body):
        """Test: entradas mal formadas devuelven None"""
        assert parse_charge_id(body, None) is None

    def test_topic(self):
        """Test: topic/type del query o type del body"""
        assert parse_topic({}, {"topic": "payment"}) == "payment"
        assert parse_topic({}, {"type": "payment"}) == "payment"
        assert parse_topic({"type": "merchant_order"}, {}) == "merchant_order"
        assert parse_topic(None, None) is None

    def test_payment_preference_id_fallbacks(self):
        """Test: preference_id -> order.id -> metadata.preference_id"""
        assert parse_payment_preference_id({"preference_id": "p1", "order": {"id": "o1"}}) == "p1"
        assert parse_payment_preference_id({"order": {"id": "o1"}}) == "o1"
        assert parse_payment_preference_id({"metadata": {"preference_id": "m1"}}) == "m1"
        assert parse_payment_preference_id({"id": "123"}) is None

    def test_payer_email_is_lowercased(self):
        """Test: email del pagador en minúsculas"""
        assert parse_payer_email({"payer": {"email": "Buyer@Example.COM"}}) == "buyer@example.com"
        assert parse_payer_email({"payer": None}) is None


class TestItemNormalization:
    """Tests para normalize_item / normalize_items"""

    def test_defaults_for_empty_item(self):
        """Test: ítem vacío toma valores por defecto"""
        assert normalize_item({}) == {
            "title": "Item",
            "quantity": 1,
            "unit_price": 0.0,
            "currency_id": "CLP",
        }

    def test_quantity_and_price_are_clamped(self):
        """Test: cantidad >= 1 y precio >= 0; la moneda se respeta tal cual"""
        item = normalize_item({"title": " Silla ", "quantity": "0", "unit_price": "-5", "currency_id": "USD"})
        assert item == {"title": "Silla", "quantity": 1, "unit_price": 0.0, "currency_id": "USD"}

    @pytest.mark.parametrize("raw,expected", [
        ("2.5", 2.5),
        (2.9, 2.9),
        ("3", 3),
        (4.0, 4),
        (0.5, 1),
        (-2, 1),
    ])
    def test_fractional_quantity_is_kept(self, raw, expected):
        """Test: las fracciones se conservan; por debajo de 1 se corrige a 1"""
        quantity = normalize_item({"quantity": raw, "unit_price": 10})["quantity"]
        assert quantity == expected
        assert type(quantity) is type(expected)

    def test_non_numeric_values(self):
        """Test: valores no numéricos caen a los mínimos"""
        item = normalize_item({"quantity": "abc", "unit_price": "nan"})
        assert item["quantity"] == 1
        assert item["unit_price"] == 0.0

    def test_default_currency_is_applied(self):
        """Test: moneda por defecto configurable"""
        items = normalize_items([{"title": "A", "quantity": 1, "unit_price": 10}], default_currency="ARS")
        assert items[0]["currency_id"] == "ARS"

    def test_to_number_rejects_bools(self):
        """Test: True/False no se interpretan como números"""
        assert to_number(True) == 0.0
        assert to_number("12.5") == 12.5
