"""
Models module for the request, response and connection state shapes of the relay.

Key components:
- checkout: Line items, customer details, the checkout request and its result.
  Money is always integer cents.
- oauth: The tenant carried through OAuth ``state`` and the token exchange result.
- media_stream: Lifecycle state of one voice stream connection.

Usage examples:
```python
from relay.models.checkout import CheckoutRequest

request = CheckoutRequest.model_validate({
    "merchantId": "M1",
    "accessToken": "token",
    "lines": [{"name": "Coffee", "priceCents": 350, "qty": 2}],
    "amountCents": 700,
})
```
"""

from relay.models.checkout import CheckoutRequest, CheckoutResult, Customer, LineItem
from relay.models.media_stream import MediaStream, StreamState
from relay.models.oauth import AuthorizationRequest, TokenExchangeResult
