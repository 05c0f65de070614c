"""
Environment-based settings for the Clover relay.

All values are read from the process environment (optionally populated from a
``.env`` file by ``python-dotenv`` at startup). Empty values fall back to the
documented defaults, so an unset and a blank variable behave the same way.
"""

import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, Field

from relay.config.constants import (
    DEFAULT_AUTHORIZE_URL,
    DEFAULT_HOST,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    DEFAULT_PORT,
    DEFAULT_REDIRECT_AFTER_PAY,
)


class Settings(BaseModel):
    """Clover credentials, endpoints and server options."""

    clover_client_id: str = Field("", description="OAuth client identifier")
    clover_client_secret: str = Field("", description="OAuth client secret")
    clover_token_url: str = Field("", description="Token endpoint for code exchange")
    clover_api_base: str = Field("", description="Base URL of the Clover REST API")
    clover_redirect_url: str = Field("", description="Registered OAuth redirect URI")
    clover_authorize_url: str = Field(DEFAULT_AUTHORIZE_URL)
    clover_redirect_after_pay: str = Field(DEFAULT_REDIRECT_AFTER_PAY)
    http_timeout_seconds: float = Field(DEFAULT_HTTP_TIMEOUT_SECONDS, gt=0)
    host: str = Field(DEFAULT_HOST)
    port: int = Field(DEFAULT_PORT)

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from environment variables.

        Numeric values are passed through as strings and coerced by pydantic.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value
        """
        return cls(
            clover_client_id=os.getenv("CLOVER_CLIENT_ID", ""),
            clover_client_secret=os.getenv("CLOVER_CLIENT_SECRET", ""),
            clover_token_url=os.getenv("CLOVER_TOKEN_URL", ""),
            clover_api_base=os.getenv("CLOVER_API_BASE", "").rstrip("/"),
            clover_redirect_url=os.getenv("CLOVER_REDIRECT_URL", ""),
            clover_authorize_url=os.getenv("CLOVER_AUTHORIZE_URL") or DEFAULT_AUTHORIZE_URL,
            clover_redirect_after_pay=(
                os.getenv("CLOVER_REDIRECT_AFTER_PAY") or DEFAULT_REDIRECT_AFTER_PAY
            ),
            http_timeout_seconds=os.getenv("HTTP_TIMEOUT_SECONDS") or DEFAULT_HTTP_TIMEOUT_SECONDS,
            host=os.getenv("HOST") or DEFAULT_HOST,
            port=os.getenv("PORT") or DEFAULT_PORT,
        )

    def missing_clover_settings(self) -> List[str]:
        """Return the names of required Clover variables that are not set."""
        required = {
            "CLOVER_CLIENT_ID": self.clover_client_id,
            "CLOVER_CLIENT_SECRET": self.clover_client_secret,
            "CLOVER_TOKEN_URL": self.clover_token_url,
            "CLOVER_API_BASE": self.clover_api_base,
            "CLOVER_REDIRECT_URL": self.clover_redirect_url,
        }
        return [name for name, value in required.items() if not value]


@lru_cache
def get_settings() -> Settings:
    """FastAPI dependency returning the settings read once at startup."""
    return Settings.from_env()
