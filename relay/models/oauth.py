"""Models for the Clover OAuth authorization-code flow."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from relay.config.constants import DEFAULT_TENANT, TOKEN_PREVIEW_LENGTH


class AuthorizationRequest(BaseModel):
    """Tenant identifier round-tripped through the OAuth ``state`` parameter."""

    tenant: str = Field(DEFAULT_TENANT, description="Caller's internal tenant id")

    @classmethod
    def from_query(cls, tenant: Optional[str]) -> "AuthorizationRequest":
        return cls(tenant=tenant or DEFAULT_TENANT)


class TokenExchangeResult(BaseModel):
    """Outcome of a successful code exchange. Never persisted by the relay."""

    access_token: str = ""
    merchant_id: str
    tenant: Optional[str] = None

    @property
    def token_preview(self) -> str:
        return self.access_token[:TOKEN_PREVIEW_LENGTH] + "..."

    def log_summary(self) -> Dict[str, Any]:
        """Loggable view of the result with the token truncated."""
        return {
            "tenant": self.tenant,
            "merchant_id": self.merchant_id,
            "token_preview": self.token_preview,
        }
