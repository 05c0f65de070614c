"""
Services module for external API integrations in the Clover relay.

Key components:
- clover_client: Async HTTP client for the Clover OAuth token endpoint and REST
  API, raising ``CloverAPIError`` for every upstream failure.
- checkout: Orchestrates order creation, line item attachment and checkout
  creation into a single hosted payment link.

Usage examples:
```python
from relay.config.settings import Settings
from relay.models.checkout import CheckoutRequest
from relay.services.checkout import create_checkout_link
from relay.services.clover_client import CloverClient

async def pay_link():
    client = CloverClient(Settings.from_env())
    request = CheckoutRequest(
        merchantId="M1",
        accessToken="token",
        lines=[{"name": "Coffee", "priceCents": 350, "qty": 2}],
        amountCents=700,
    )
    result = await create_checkout_link(client, request)
    print(result.payUrl)
```
"""

# Services module initialization
