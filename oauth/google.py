"""Browser-based Google login returning an ID token with an embedded nonce"""

import logging
from typing import Callable, Optional

from settings import DEFAULT_OAUTH_CALLBACK_PORT, DEFAULT_OAUTH_CALLBACK_TIMEOUT, OAUTH_CALLBACK_PATH
from .authorization import create_authorization_flow, open_browser
from .callback_server import wait_for_authorization_code
from .token_exchange import exchange_code_for_id_token

logger = logging.getLogger(__name__)


async def get_google_id_token(
    nonce: str,
    client_id: str,
    client_secret: Optional[str] = None,
    port: int = DEFAULT_OAUTH_CALLBACK_PORT,
    timeout: float = DEFAULT_OAUTH_CALLBACK_TIMEOUT,
    launch_browser: Callable[[str], bool] = open_browser,
) -> str:
    """Run the PKCE authorization-code flow and return Google's ID token

    The returned token carries ``nonce`` in its claims, which the zkLogin
    prover requires.

    Args:
        nonce: zkLogin nonce generated from the ephemeral keypair
        client_id: Google OAuth client id (Desktop app type)
        client_secret: Google OAuth client secret, if any
        port: Loopback callback port
        timeout: Seconds to wait for the user to finish in the browser
        launch_browser: Opens the URL; its failure never fails the flow

    Returns:
        The Google ID token
    """
    redirect_uri = f"http://localhost:{port}{OAUTH_CALLBACK_PATH}"
    flow = create_authorization_flow(client_id=client_id, redirect_uri=redirect_uri, nonce=nonce)

    logger.info("Opening browser for Google login...")
    logger.info(f"If the browser does not open automatically, visit:\n  {flow.url}")

    def _on_listening() -> None:
        logger.info(f"Waiting for Google callback on port {port} (timeout: {timeout:g} seconds)...")
        try:
            launch_browser(flow.url)
        except Exception as e:
            logger.warning(f"Could not open browser: {e}. Open the URL above manually.")

    code = await wait_for_authorization_code(port=port, timeout=timeout, on_listening=_on_listening)

    logger.info("Google OAuth code received, exchanging for tokens...")
    return await exchange_code_for_id_token(
        code=code,
        code_verifier=flow.pkce.verifier,
        client_id=client_id,
        redirect_uri=redirect_uri,
        client_secret=client_secret,
    )
