"""
Pydantic models for the checkout request and response.

Prices and amounts are integer cents everywhere; strict integer fields reject
floats and numeric strings so no floating-point currency value is ever accepted.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, StrictInt, field_validator


class LineItem(BaseModel):
    """One order line: an inventory item reference or a freeform name."""

    itemId: Optional[str] = Field(None, description="Clover inventory item id")
    name: Optional[str] = Field(None, description="Display name for freeform lines")
    priceCents: StrictInt = Field(..., ge=0, description="Unit price in cents")
    qty: Optional[StrictInt] = Field(None, gt=0, description="Quantity")

    def to_clover_payload(self) -> Dict[str, Any]:
        """Build the line_items request body, omitting absent optional fields."""
        payload: Dict[str, Any] = {}
        if self.itemId:
            payload["item"] = {"id": self.itemId}
        if self.name is not None:
            payload["name"] = self.name
        payload["price"] = self.priceCents
        if self.qty is not None:
            payload["quantity"] = self.qty
        return payload


class Customer(BaseModel):
    """Customer contact details. Accepted but not used by the relay."""

    phone: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None


class CheckoutRequest(BaseModel):
    """Body of POST /orders/checkout."""

    merchantId: str = Field(..., min_length=1)
    accessToken: str = Field(..., min_length=1)
    lines: List[LineItem]
    amountCents: StrictInt = Field(..., gt=0, description="Total charged, in cents")
    customer: Optional[Customer] = None

    @field_validator("merchantId", "accessToken")
    def validate_not_blank(cls, v):
        """Reject identifiers made only of whitespace."""
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class CheckoutResult(BaseModel):
    """Created order id and the hosted payment link for it."""

    orderId: str
    payUrl: str
