"""
Order and checkout orchestration.

Turns a validated checkout request into a payable link: create the order, attach
each line in input order, then open a checkout for the caller-supplied amount.
A failure at any step propagates and the remaining steps are skipped; nothing
already created upstream is rolled back.
"""

import logging

from relay.config.constants import LOGGER_NAME
from relay.models.checkout import CheckoutRequest, CheckoutResult
from relay.services.clover_client import CloverClient

logger = logging.getLogger(LOGGER_NAME)


async def create_checkout_link(
    client: CloverClient, request: CheckoutRequest
) -> CheckoutResult:
    """
    Create a Clover order with its line items and a hosted checkout for it.

    Args:
        client: Clover client used for every upstream call
        request: The validated checkout request

    Returns:
        The created order id and hosted payment URL

    Raises:
        CloverAPIError: If any upstream call fails
    """
    merchant_id = request.merchantId
    token = request.accessToken

    order_id = await client.create_order(merchant_id, token)
    logger.info(f"Created order {order_id} for merchant {merchant_id}")

    for line in request.lines:
        await client.add_line_item(merchant_id, token, order_id, line)
    logger.info(f"Attached {len(request.lines)} line items to order {order_id}")

    pay_url = await client.create_checkout(
        merchant_id, token, order_id, request.amountCents
    )
    logger.info(f"Created checkout for order {order_id}: {request.amountCents} cents")

    return CheckoutResult(orderId=order_id, payUrl=pay_url)
