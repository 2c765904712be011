"""Authorization code to identity token exchange"""

import logging
from typing import Optional

import httpx

from exceptions import TokenExchangeError
from settings import CONNECT_TIMEOUT, GOOGLE_TOKEN_URL, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


async def exchange_code_for_id_token(
    code: str,
    code_verifier: str,
    client_id: str,
    redirect_uri: str,
    client_secret: Optional[str] = None,
    token_url: str = GOOGLE_TOKEN_URL,
) -> str:
    """Exchange an authorization code for an OpenID Connect ID token

    Args:
        code: Authorization code from the callback
        code_verifier: PKCE code verifier matching the challenge sent earlier
        client_id: OAuth client id
        redirect_uri: Redirect URI used in the authorization request
        client_secret: Client secret, if the OAuth client has one
        token_url: Token endpoint

    Returns:
        The ``id_token`` string

    Raises:
        TokenExchangeError: Non-2xx response or no ``id_token`` in the body
    """
    data = {
        "code": code,
        "client_id": client_id,
        "redirect_uri": redirect_uri,
        "grant_type": "authorization_code",
        "code_verifier": code_verifier,
    }
    if client_secret:
        data["client_secret"] = client_secret

    async with httpx.AsyncClient(timeout=httpx.Timeout(REQUEST_TIMEOUT, connect=CONNECT_TIMEOUT)) as client:
        response = await client.post(
            token_url,
            data=data,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )

    if not response.is_success:
        raise TokenExchangeError(
            f"Token exchange failed ({response.status_code}): {response.text}",
            status_code=response.status_code,
            body=response.text,
        )

    id_token = response.json().get("id_token")
    if not id_token:
        raise TokenExchangeError(
            "No id_token in Google token response",
            status_code=response.status_code,
            body=response.text,
        )

    logger.info("Google ID token obtained successfully")
    return id_token
