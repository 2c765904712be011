"""Google OAuth authorization URL construction"""

import logging
import webbrowser
from typing import NamedTuple
from urllib.parse import urlencode

from settings import GOOGLE_AUTH_URL, GOOGLE_SCOPE
from .pkce import PKCEPair, generate_pkce

logger = logging.getLogger(__name__)


class AuthorizationFlow(NamedTuple):
    """OAuth authorization flow data"""
    pkce: PKCEPair
    nonce: str
    url: str


def create_authorization_flow(client_id: str, redirect_uri: str, nonce: str) -> AuthorizationFlow:
    """
    Create a Google authorization-code flow with PKCE.

    The zkLogin nonce is passed through to the identity token's ``nonce``
    claim, which is what binds the ephemeral keypair to this grant.

    Args:
        client_id: Google OAuth client id
        redirect_uri: Loopback redirect URI
        nonce: zkLogin nonce derived from the ephemeral keypair

    Returns:
        AuthorizationFlow: Tuple of (pkce, nonce, url)
    """
    pkce = generate_pkce()

    params = {
        "client_id": client_id,
        "redirect_uri": redirect_uri,
        "response_type": "code",
        "scope": GOOGLE_SCOPE,
        "nonce": nonce,
        "code_challenge": pkce.challenge,
        "code_challenge_method": "S256",
        "access_type": "offline",
        "prompt": "select_account",
    }

    url = f"{GOOGLE_AUTH_URL}?{urlencode(params)}"

    return AuthorizationFlow(pkce=pkce, nonce=nonce, url=url)


def open_browser(url: str) -> bool:
    """Open the authorization URL in the default browser

    Failure only means the user has to navigate manually, so it is logged
    and reported through the return value.

    Returns:
        True if a browser was launched, False otherwise
    """
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as e:
        logger.warning(f"Could not open browser: {e}")
        return False
    if not opened:
        logger.warning("No browser available, open the login URL manually")
    return opened
