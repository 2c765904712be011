"""
Wires configuration, session, client and signer together.
"""
import logging
from dataclasses import dataclass

from api.client import FortemClient
from auth import Authenticator, AuthResult, SessionInitializer, SessionSigner, create_authenticator
from config.app_config import AppConfig

logger = logging.getLogger(__name__)


@dataclass
class Runtime:
    """Everything the tools need, built once per process"""
    config: AppConfig
    authenticator: Authenticator
    session: SessionInitializer
    client: FortemClient
    signer: SessionSigner


def build_runtime(app_config: AppConfig) -> Runtime:
    """
    Build the runtime without logging in.

    The session's login closes over the client, and the client holds the
    session for its hooks; login calls on the client skip those hooks.
    """
    authenticator = create_authenticator(app_config)

    client: FortemClient

    async def login() -> AuthResult:
        return await authenticator.login(client)

    session = SessionInitializer(login)
    client = FortemClient(app_config.network.api_url, session=session)

    logger.info(f"Network: {app_config.network.name} ({app_config.network.api_url})")
    return Runtime(
        config=app_config,
        authenticator=authenticator,
        session=session,
        client=client,
        signer=SessionSigner(session),
    )
