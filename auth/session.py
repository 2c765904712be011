"""
Lazy, single-flight session management.

The session logs in on first use rather than at startup. Concurrent callers
that need a session while a login is running all wait on the same attempt,
so at most one authenticator runs at a time.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from exceptions import NotAuthenticatedError
from signer import SignedMessage, Signer
from .base import AuthResult, WalletIdentity

logger = logging.getLogger(__name__)

LoginFunction = Callable[[], Awaitable[AuthResult]]


@dataclass
class Session:
    """Mutable login state, owned by one SessionInitializer"""
    access_token: Optional[str] = None
    identity: Optional[WalletIdentity] = None
    initialized: bool = False
    in_flight: Optional["asyncio.Task[None]"] = None


class SessionInitializer:
    """
    Runs the login at most once at a time and caches its result.

    Usage:
        session = SessionInitializer(lambda: authenticator.login(client))
        await session.ensure_init()
        session.access_token
    """

    def __init__(self, login: LoginFunction):
        self._login = login
        self._generation = 0
        self.session = Session()

    @property
    def access_token(self) -> Optional[str]:
        return self.session.access_token

    @property
    def identity(self) -> Optional[WalletIdentity]:
        return self.session.identity

    @property
    def initialized(self) -> bool:
        return self.session.initialized

    async def ensure_init(self) -> None:
        """
        Make sure a login has completed.

        Returns immediately when initialized. Otherwise starts a login, or
        joins the one already running. A caller that is cancelled while
        waiting does not cancel the shared attempt.

        Raises:
            Whatever the login raised; every waiter sees the same error.
        """
        while not self.session.initialized:
            generation = self._generation
            task = self.session.in_flight
            if task is None:
                task = asyncio.create_task(self._attempt(generation))
                self.session.in_flight = task
            try:
                await asyncio.shield(task)
            except Exception:
                if generation == self._generation:
                    raise
                logger.debug("Superseded login attempt failed, joining the current one")

    async def _attempt(self, generation: int) -> None:
        try:
            result = await self._login()
            if generation != self._generation:
                logger.debug("Discarding result of a superseded login attempt")
                return
            self.session.access_token = result.access_token
            self.session.identity = result.identity
            self.session.initialized = True
        finally:
            if generation == self._generation:
                self.session.in_flight = None

    def invalidate(self) -> None:
        """Forget the session; a login still running will not commit"""
        self._generation += 1
        self.session = Session()

    async def refresh(self, rejected_token: Optional[str] = None) -> None:
        """
        Re-authenticate after the API rejected ``rejected_token``.

        Joins a login already in progress. If the session already holds a
        different token, another caller re-authenticated first and nothing
        else happens.
        """
        if self.session.in_flight is not None:
            await self.ensure_init()
            return
        if self.session.initialized and self.session.access_token != rejected_token:
            logger.debug("Token already refreshed by a concurrent request")
            return
        self.invalidate()
        await self.ensure_init()


class SessionSigner(Signer):
    """Signer that logs in on first use and delegates to the session's signer"""

    def __init__(self, session: SessionInitializer):
        self.session = session

    def get_address(self) -> str:
        identity = self.session.identity
        if identity is None:
            raise NotAuthenticatedError("Not authenticated. No login has completed yet.")
        return identity.address

    async def _signer(self) -> Signer:
        await self.session.ensure_init()
        identity = self.session.identity
        if identity is None:
            raise NotAuthenticatedError("Not authenticated. No login has completed yet.")
        return identity.signer

    async def sign_transaction(self, tx_bytes: str) -> str:
        signer = await self._signer()
        return await signer.sign_transaction(tx_bytes)

    async def sign_personal_message(self, message: bytes) -> SignedMessage:
        signer = await self._signer()
        return await signer.sign_personal_message(message)
