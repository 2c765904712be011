"""Pick the login strategy for the configured credentials"""

import logging

from config.app_config import AppConfig, AuthMode
from exceptions import ConfigurationError
from zklogin import load_poseidon
from .base import Authenticator
from .direct_key import DirectKeyAuthenticator
from .zk_login import ZkLoginAuthenticator

logger = logging.getLogger(__name__)


def create_authenticator(app_config: AppConfig) -> Authenticator:
    """
    Build the authenticator for ``app_config.auth_mode``.

    Raises:
        ConfigurationError: If the private key or the Poseidon hash path is unusable
    """
    if app_config.auth_mode == AuthMode.DIRECT_KEY:
        try:
            return DirectKeyAuthenticator.from_private_key(app_config.sui_private_key)
        except ValueError as e:
            raise ConfigurationError(f"SUI_PRIVATE_KEY is invalid: {e}") from e

    try:
        poseidon = load_poseidon(app_config.poseidon_hash)
    except (ImportError, ValueError) as e:
        raise ConfigurationError(f"ZKLOGIN_POSEIDON could not be loaded: {e}") from e

    logger.debug(f"Using Google login with callback port {app_config.callback_port}")
    return ZkLoginAuthenticator(
        network=app_config.network,
        poseidon=poseidon,
        client_id=app_config.google_client_id,
        client_secret=app_config.google_client_secret,
        callback_port=app_config.callback_port,
        callback_timeout=app_config.callback_timeout,
    )
