"""Public checkout endpoint called by the phone agent."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from relay.config.constants import (
    LOGGER_NAME,
    RESPONSE_BAD_PAYLOAD,
    RESPONSE_CHECKOUT_ERROR,
)
from relay.middleware import parse_body
from relay.models.checkout import CheckoutRequest
from relay.services.checkout import create_checkout_link
from relay.services.clover_client import CloverAPIError, CloverClient, get_clover_client

logger = logging.getLogger(LOGGER_NAME)

router = APIRouter(tags=["orders"])


@router.post("/orders/checkout")
async def orders_checkout(
    request: Request, client: CloverClient = Depends(get_clover_client)
):
    """
    Create a Clover order and return its hosted payment link.

    The payload is validated before any upstream call. ``amountCents`` is passed
    through as given and is not checked against the line prices.

    Returns:
        ``{"orderId": ..., "payUrl": ...}``, 400 for a bad payload, or 500 when
        any Clover call fails
    """
    payload = await parse_body(request)
    try:
        checkout_request = CheckoutRequest.model_validate(payload)
    except ValidationError as e:
        logger.warning(f"Rejected checkout payload: {e.error_count()} validation errors")
        return PlainTextResponse(RESPONSE_BAD_PAYLOAD, status_code=400)

    if checkout_request.customer and checkout_request.customer.phone:
        logger.debug("Checkout includes customer phone; no notification is sent")

    try:
        result = await create_checkout_link(client, checkout_request)
    except CloverAPIError as e:
        logger.error(f"Checkout error: {e.detail}")
        return PlainTextResponse(RESPONSE_CHECKOUT_ERROR, status_code=500)

    return result.model_dump()
