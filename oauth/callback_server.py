"""
Local OAuth callback server

Captures exactly one authorization code on a loopback port. The server is a
small state machine: IDLE -> LISTENING -> SUCCEEDED | FAILED | TIMED_OUT.
The task awaiting the code owns the listener and closes it once, whatever
the terminal state.
"""
import asyncio
import html
import logging
from enum import Enum
from typing import Callable, Optional

from aiohttp import web

from exceptions import CallbackServerBindError, OAuthError, OAuthTimeoutError
from settings import (
    DEFAULT_OAUTH_CALLBACK_PORT,
    DEFAULT_OAUTH_CALLBACK_TIMEOUT,
    OAUTH_CALLBACK_HOST,
    OAUTH_CALLBACK_PATH,
)

logger = logging.getLogger(__name__)

SUCCESS_PAGE = """
<html>
    <body>
        <h2>Authentication successful! You can close this tab.</h2>
    </body>
</html>
"""

FAILURE_PAGE = """
<html>
    <body>
        <h2>Authentication failed: {error}</h2>
        <p>You can close this window and try again.</p>
    </body>
</html>
"""

ALREADY_COMPLETED_PAGE = """
<html>
    <body>
        <h2>This login request has already completed.</h2>
    </body>
</html>
"""


class CaptureState(str, Enum):
    """Lifecycle of one callback server"""
    IDLE = "idle"
    LISTENING = "listening"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    TIMED_OUT = "timed_out"


class OAuthCallbackServer:
    """Local HTTP server for a single OAuth redirect"""

    def __init__(
        self,
        port: int = DEFAULT_OAUTH_CALLBACK_PORT,
        host: str = OAUTH_CALLBACK_HOST,
        path: str = OAUTH_CALLBACK_PATH,
    ):
        self.port = port
        self.host = host
        self.path = path
        self.state = CaptureState.IDLE
        self.app = web.Application()
        self.runner: Optional[web.AppRunner] = None
        self._result: Optional[asyncio.Future] = None

        # Only the callback path is routed; anything else gets aiohttp's 404
        self.app.router.add_get(path, self._handle_callback)

    def _finish(self, state: CaptureState, code: Optional[str] = None, error: Optional[Exception] = None) -> None:
        self.state = state
        if self._result is None or self._result.done():
            return
        if error is not None:
            self._result.set_exception(error)
        else:
            self._result.set_result(code)

    async def _handle_callback(self, request: web.Request) -> web.Response:
        """Handle OAuth callback request"""
        if self.state is not CaptureState.LISTENING:
            return web.Response(text=ALREADY_COMPLETED_PAGE, content_type="text/html", status=409)

        code = request.query.get("code")
        error = request.query.get("error")

        if code:
            self._finish(CaptureState.SUCCEEDED, code=code)
            return web.Response(text=SUCCESS_PAGE, content_type="text/html")

        error = error or "unknown error"
        logger.warning(f"OAuth provider returned an error: {error}")
        self._finish(CaptureState.FAILED, error=OAuthError(f"Google OAuth error: {error}"))
        return web.Response(
            text=FAILURE_PAGE.format(error=html.escape(error)),
            content_type="text/html",
            status=400,
        )

    async def start(self) -> None:
        """Bind the listener

        Raises:
            CallbackServerBindError: If the port cannot be bound. The redirect
                URI is registered for this exact port, so no other port is tried.
        """
        if self.state is not CaptureState.IDLE:
            raise RuntimeError(f"Callback server already used (state: {self.state.value})")

        self._result = asyncio.get_running_loop().create_future()
        self.runner = web.AppRunner(self.app, access_log=None)
        await self.runner.setup()

        site = web.TCPSite(self.runner, host=self.host, port=self.port)
        try:
            await site.start()
        except OSError as e:
            await self.stop()
            raise CallbackServerBindError(
                f"Failed to start callback server on port {self.port}: {e}"
            ) from e

        self.state = CaptureState.LISTENING
        logger.info(f"OAuth callback server listening on {self.host}:{self.port}{self.path}")

    async def wait_for_code(self, timeout: float = DEFAULT_OAUTH_CALLBACK_TIMEOUT) -> str:
        """
        Wait for the OAuth callback and shut the listener down.

        Args:
            timeout: Maximum time to wait in seconds (default 5 minutes)

        Returns:
            The authorization code

        Raises:
            OAuthError: The provider redirected with an error
            OAuthTimeoutError: No callback arrived in time
        """
        if self._result is None:
            raise RuntimeError("Callback server not started")
        try:
            return await asyncio.wait_for(asyncio.shield(self._result), timeout=timeout)
        except asyncio.TimeoutError:
            self.state = CaptureState.TIMED_OUT
            self._result.cancel()
            raise OAuthTimeoutError(
                f"Google OAuth callback timeout ({timeout:g} seconds exceeded)"
            ) from None
        finally:
            await self.stop()

    async def stop(self) -> None:
        """Stop the callback server"""
        if self._result is not None and self._result.done() and not self._result.cancelled():
            # Mark the exception as retrieved when nobody awaited it
            self._result.exception()
        if self.runner:
            runner, self.runner = self.runner, None
            await runner.cleanup()


async def wait_for_authorization_code(
    port: int = DEFAULT_OAUTH_CALLBACK_PORT,
    timeout: float = DEFAULT_OAUTH_CALLBACK_TIMEOUT,
    host: str = OAUTH_CALLBACK_HOST,
    on_listening: Optional[Callable[[], None]] = None,
) -> str:
    """
    Start a callback server and wait for one authorization code.

    Args:
        port: Loopback port the redirect URI points at
        timeout: Seconds to wait for the redirect
        host: Interface to bind
        on_listening: Called once the port is bound, e.g. to open the browser

    Returns:
        The authorization code
    """
    server = OAuthCallbackServer(port=port, host=host)
    await server.start()
    if on_listening is not None:
        try:
            on_listening()
        except Exception:
            await server.stop()
            raise
    return await server.wait_for_code(timeout=timeout)
