from unittest.mock import patch

import pytest


def checkout_payload(**overrides):
    payload = {
        "merchantId": "M1",
        "accessToken": "T",
        "lines": [{"name": "Coffee", "priceCents": 350, "qty": 2}],
        "amountCents": 700,
    }
    payload.update(overrides)
    return payload


class TestCheckoutEndpoint:
    """Tests for POST /orders/checkout against a stub Clover platform"""

    def test_checkout_returns_order_and_pay_url(self, client, platform):
        response = client.post("/orders/checkout", json=checkout_payload())

        assert response.status_code == 200
        assert response.json() == {"orderId": "O1", "payUrl": "https://pay.example/O1"}
        assert platform.paths == [
            "/v3/merchants/M1/orders",
            "/v3/merchants/M1/orders/O1/line_items",
            "/v3/merchants/M1/checkouts",
        ]

    def test_every_call_is_authenticated(self, client, platform):
        client.post("/orders/checkout", json=checkout_payload())

        assert len(platform.requests) == 3
        for request in platform.requests:
            assert request.headers["authorization"] == "Bearer T"

    def test_order_line_and_checkout_bodies(self, client, platform, settings):
        client.post("/orders/checkout", json=checkout_payload())

        assert platform.json_bodies("/orders") == [{"state": "OPEN", "title": "Phone AI Order"}]
        assert platform.json_bodies("/line_items") == [
            {"name": "Coffee", "price": 350, "quantity": 2}
        ]
        assert platform.json_bodies("/checkouts") == [
            {
                "orderId": "O1",
                "amount": 700,
                "currency": "USD",
                "redirectUrl": settings.clover_redirect_after_pay,
            }
        ]

    def test_line_items_attached_in_input_order(self, client, platform):
        lines = [
            {"name": "Latte", "priceCents": 450, "qty": 1},
            {"itemId": "ITEM9", "priceCents": 200, "qty": 3},
            {"name": "Bagel", "priceCents": 300, "qty": 2},
        ]
        response = client.post("/orders/checkout", json=checkout_payload(lines=lines, amountCents=1650))

        assert response.status_code == 200
        assert platform.json_bodies("/line_items") == [
            {"name": "Latte", "price": 450, "quantity": 1},
            {"item": {"id": "ITEM9"}, "price": 200, "quantity": 3},
            {"name": "Bagel", "price": 300, "quantity": 2},
        ]

    def test_amount_is_passed_through_verbatim(self, client, platform):
        client.post("/orders/checkout", json=checkout_payload(amountCents=999))

        assert platform.json_bodies("/checkouts")[0]["amount"] == 999

    def test_empty_lines_still_create_checkout(self, client, platform):
        response = client.post("/orders/checkout", json=checkout_payload(lines=[]))

        assert response.status_code == 200
        assert platform.paths == ["/v3/merchants/M1/orders", "/v3/merchants/M1/checkouts"]

    def test_customer_is_accepted(self, client):
        response = client.post(
            "/orders/checkout", json=checkout_payload(customer={"phone": "+15550100"})
        )

        assert response.status_code == 200

    @pytest.mark.parametrize(
        "overrides",
        [
            {"merchantId": None},
            {"merchantId": ""},
            {"accessToken": None},
            {"accessToken": "  "},
            {"lines": None},
            {"lines": "Coffee"},
            {"lines": {"name": "Coffee"}},
            {"lines": ["Coffee"]},
            {"lines": [{"name": "Coffee"}]},
            {"lines": [{"name": "Coffee", "priceCents": 3.5, "qty": 1}]},
            {"lines": [{"name": "Coffee", "priceCents": 350, "qty": 0}]},
            {"amountCents": None},
            {"amountCents": 0},
            {"amountCents": -5},
            {"amountCents": 7.5},
            {"amountCents": "700"},
        ],
    )
    def test_bad_payload_rejected_without_upstream_calls(self, client, platform, overrides):
        payload = {k: v for k, v in checkout_payload(**overrides).items() if v is not None}

        response = client.post("/orders/checkout", json=payload)

        assert response.status_code == 400
        assert response.text == "Bad payload"
        assert platform.requests == []

    def test_non_object_body_rejected(self, client, platform):
        response = client.post("/orders/checkout", json=[checkout_payload()])

        assert response.status_code == 400
        assert platform.requests == []

    def test_order_failure_aborts_remaining_steps(self, client, platform):
        platform.failures["/orders"] = 401

        response = client.post("/orders/checkout", json=checkout_payload())

        assert response.status_code == 500
        assert response.text == "Checkout error"
        assert platform.paths == ["/v3/merchants/M1/orders"]

    def test_line_item_failure_skips_later_lines_and_checkout(self, client, platform):
        platform.failures["/line_items"] = 400
        lines = [
            {"name": "Latte", "priceCents": 450, "qty": 1},
            {"name": "Bagel", "priceCents": 300, "qty": 2},
        ]

        response = client.post("/orders/checkout", json=checkout_payload(lines=lines))

        assert response.status_code == 500
        assert platform.paths == [
            "/v3/merchants/M1/orders",
            "/v3/merchants/M1/orders/O1/line_items",
        ]

    def test_checkout_failure_returns_500(self, client, platform):
        platform.failures["/checkouts"] = 503

        response = client.post("/orders/checkout", json=checkout_payload())

        assert response.status_code == 500
        assert len(platform.requests) == 3

    def test_network_error_returns_500(self, client, platform):
        platform.network_errors.append("/orders")

        response = client.post("/orders/checkout", json=checkout_payload())

        assert response.status_code == 500
        assert response.text == "Checkout error"

    def test_checkout_without_href_returns_500(self, client, platform):
        platform.checkout_body = {"id": "CHK1"}

        response = client.post("/orders/checkout", json=checkout_payload())

        assert response.status_code == 500

    def test_line_item_redirect_aborts_checkout(self, client, platform):
        platform.failures["/line_items"] = 307
        lines = [
            {"name": "Latte", "priceCents": 450, "qty": 1},
            {"name": "Bagel", "priceCents": 300, "qty": 2},
        ]

        response = client.post("/orders/checkout", json=checkout_payload(lines=lines))

        assert response.status_code == 500
        assert response.text == "Checkout error"
        assert platform.paths == [
            "/v3/merchants/M1/orders",
            "/v3/merchants/M1/orders/O1/line_items",
        ]

    def test_numeric_order_id_is_upstream_error(self, client, platform):
        platform.order_body = {"id": 12345}

        with patch("relay.handlers.checkout_handlers.logger") as mock_logger:
            response = client.post("/orders/checkout", json=checkout_payload())

        assert response.status_code == 500
        assert response.text == "Checkout error"
        assert platform.paths == ["/v3/merchants/M1/orders"]
        mock_logger.error.assert_called_once()

    def test_line_without_quantity_omits_it(self, client, platform):
        lines = [{"itemId": "ITEM9", "priceCents": 200}]

        response = client.post("/orders/checkout", json=checkout_payload(lines=lines))

        assert response.status_code == 200
        assert platform.json_bodies("/line_items") == [{"item": {"id": "ITEM9"}, "price": 200}]
