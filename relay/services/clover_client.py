"""
HTTP client for the Clover OAuth token endpoint and REST API.

This module wraps the handful of Clover calls the relay needs: exchanging an
authorization code for an access token, creating an order, attaching line items
and creating a hosted checkout. Every upstream failure, whether a network error
or a non-2xx response, is raised as a single ``CloverAPIError`` carrying the
upstream detail so handlers can log it and answer with a server error.
"""

import logging
from typing import Any, Dict, Optional

import httpx
from fastapi import Depends

from relay.config.constants import (
    CHECKOUT_CURRENCY,
    LOGGER_NAME,
    ORDER_STATE_OPEN,
    ORDER_TITLE,
)
from relay.config.settings import Settings, get_settings
from relay.models.checkout import LineItem

logger = logging.getLogger(LOGGER_NAME)


class CloverAPIError(Exception):
    """Raised when a call to Clover fails or returns an unusable response."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        detail: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail if detail is not None else message


def _error_detail(response: httpx.Response) -> Any:
    """Return the JSON error body if there is one, else the raw text."""
    try:
        return response.json()
    except ValueError:
        return response.text


class CloverClient:
    """
    Client for the Clover platform.

    A fresh ``httpx.AsyncClient`` is opened per call so nothing is shared between
    requests. ``transport`` lets callers substitute an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        self._transport = transport

    def _merchant_url(self, merchant_id: str, path: str) -> str:
        return f"{self.settings.clover_api_base}/v3/merchants/{merchant_id}{path}"

    async def _post(
        self,
        url: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, str]] = None,
        token: Optional[str] = None,
    ) -> httpx.Response:
        headers = {"Authorization": f"Bearer {token}"} if token else None
        try:
            async with httpx.AsyncClient(
                timeout=self.settings.http_timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(url, json=json, data=data, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise CloverAPIError(f"Request to {url} failed: {e}", detail=str(e)) from e

        if not response.is_success:
            raise CloverAPIError(
                f"Clover returned {response.status_code} for {url}",
                status_code=response.status_code,
                detail=_error_detail(response),
            )
        return response

    @staticmethod
    def _required_field(response: httpx.Response, field: str) -> str:
        try:
            body = response.json()
        except ValueError as e:
            raise CloverAPIError(
                f"Clover response is not JSON (expected '{field}')",
                status_code=response.status_code,
                detail=response.text,
            ) from e
        value = body.get(field) if isinstance(body, dict) else None
        if not isinstance(value, str) or not value:
            raise CloverAPIError(
                f"Clover response is missing string field '{field}'",
                status_code=response.status_code,
                detail=body,
            )
        return value

    async def exchange_code(self, code: str) -> str:
        """
        Exchange an authorization code for an access token.

        Args:
            code: The authorization code from the OAuth callback

        Returns:
            The access token, or an empty string when the response carries none
        """
        response = await self._post(
            self.settings.clover_token_url,
            data={
                "client_id": self.settings.clover_client_id,
                "client_secret": self.settings.clover_client_secret,
                "code": code,
            },
        )
        try:
            body = response.json()
        except ValueError:
            body = None
        token = body.get("access_token") if isinstance(body, dict) else None
        return token or ""

    async def create_order(self, merchant_id: str, token: str) -> str:
        """Create an open order and return its id."""
        response = await self._post(
            self._merchant_url(merchant_id, "/orders"),
            json={"state": ORDER_STATE_OPEN, "title": ORDER_TITLE},
            token=token,
        )
        return self._required_field(response, "id")

    async def add_line_item(
        self, merchant_id: str, token: str, order_id: str, line: LineItem
    ) -> None:
        """Attach one line item to an existing order."""
        await self._post(
            self._merchant_url(merchant_id, f"/orders/{order_id}/line_items"),
            json=line.to_clover_payload(),
            token=token,
        )

    async def create_checkout(
        self, merchant_id: str, token: str, order_id: str, amount_cents: int
    ) -> str:
        """
        Create a hosted checkout for an order.

        Returns:
            The hosted payment link (``href``)
        """
        response = await self._post(
            self._merchant_url(merchant_id, "/checkouts"),
            json={
                "orderId": order_id,
                "amount": amount_cents,
                "currency": CHECKOUT_CURRENCY,
                "redirectUrl": self.settings.clover_redirect_after_pay,
            },
            token=token,
        )
        return self._required_field(response, "href")


def get_clover_client(settings: Settings = Depends(get_settings)) -> CloverClient:
    """FastAPI dependency providing a Clover client bound to current settings."""
    return CloverClient(settings)
