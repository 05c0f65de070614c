"""
Clover OAuth authorization-code flow.

``/clover/oauth/start`` sends the merchant owner to Clover's consent page with the
caller's tenant id as ``state``. ``/clover/oauth/callback`` exchanges the returned
code for an access token. The token is only logged (truncated); storing it is the
responsibility of whatever system sits behind the relay.
"""

import logging
from typing import Optional

import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, RedirectResponse

from relay.config.constants import (
    LOGGER_NAME,
    RESPONSE_MISSING_OAUTH_FIELDS,
    RESPONSE_OAUTH_CONNECTED,
    RESPONSE_OAUTH_ERROR,
)
from relay.config.settings import Settings, get_settings
from relay.models.oauth import AuthorizationRequest, TokenExchangeResult
from relay.services.clover_client import CloverAPIError, CloverClient, get_clover_client

logger = logging.getLogger(LOGGER_NAME)

router = APIRouter(prefix="/clover/oauth", tags=["oauth"])


def build_authorize_url(settings: Settings, auth_request: AuthorizationRequest) -> str:
    """Build the Clover consent URL for an authorization-code grant."""
    url = httpx.URL(
        settings.clover_authorize_url,
        params={
            "client_id": settings.clover_client_id,
            "response_type": "code",
            "redirect_uri": settings.clover_redirect_url,
            "state": auth_request.tenant,
        },
    )
    return str(url)


@router.get("/start")
async def oauth_start(
    tenant: Optional[str] = None, settings: Settings = Depends(get_settings)
):
    """Redirect the merchant owner to Clover's consent page."""
    auth_request = AuthorizationRequest.from_query(tenant)
    url = build_authorize_url(settings, auth_request)
    logger.info(f"Starting Clover OAuth for tenant: {auth_request.tenant}")
    return RedirectResponse(url, status_code=302)


@router.get("/callback")
async def oauth_callback(
    code: Optional[str] = None,
    merchant_id: Optional[str] = None,
    state: Optional[str] = None,
    client: CloverClient = Depends(get_clover_client),
):
    """
    Handle Clover's redirect back after consent.

    Returns:
        400 if ``code`` or ``merchant_id`` is missing, 500 if the token exchange
        fails, otherwise a plain confirmation page
    """
    if not code or not merchant_id:
        return PlainTextResponse(RESPONSE_MISSING_OAUTH_FIELDS, status_code=400)

    try:
        access_token = await client.exchange_code(code)
    except CloverAPIError as e:
        logger.error(f"OAuth error: {e.detail}")
        return PlainTextResponse(RESPONSE_OAUTH_ERROR, status_code=500)

    result = TokenExchangeResult(
        access_token=access_token, merchant_id=merchant_id, tenant=state
    )
    logger.info(f"Clover connected: {result.log_summary()}")
    return PlainTextResponse(RESPONSE_OAUTH_CONNECTED)
