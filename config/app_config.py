"""Validated application configuration

All user-facing settings are read once at startup into a frozen
``AppConfig``. Missing or invalid values raise ``ConfigurationError`` so the
process can exit before any tool is served.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import settings
from exceptions import ConfigurationError
from .loader import ConfigLoader, get_config_loader
from .network import NetworkConfig, get_network_config

logger = logging.getLogger(__name__)

MISSING_CREDENTIAL_MESSAGE = (
    "SUI_PRIVATE_KEY is required.\n\n"
    "  Set SUI_PRIVATE_KEY=suiprivkey1... to authenticate.\n\n"
    "  Export your private key from Sui Wallet -> Settings -> Accounts -> Export Private Key.\n"
    "  Alternatively set GOOGLE_CLIENT_ID and ZKLOGIN_POSEIDON to log in with Google (zkLogin)."
)


class AuthMode(str, Enum):
    """Login strategy selected by the configured credentials"""
    DIRECT_KEY = "direct_key"
    ZKLOGIN = "zklogin"


@dataclass(frozen=True)
class AppConfig:
    """Startup configuration

    Attributes:
        network: Resolved endpoint set
        auth_mode: Which authenticator to run
        sui_private_key: Private key for direct-key login
        google_client_id: OAuth client id for zkLogin
        google_client_secret: OAuth client secret for zkLogin (optional for PKCE clients)
        poseidon_hash: "module:function" path of the Poseidon hash for zkLogin
        callback_port: Loopback port for the OAuth redirect
        callback_timeout: Seconds to wait for the OAuth redirect
    """
    network: NetworkConfig
    auth_mode: AuthMode
    sui_private_key: Optional[str] = None
    google_client_id: Optional[str] = None
    google_client_secret: Optional[str] = None
    poseidon_hash: Optional[str] = None
    callback_port: int = settings.DEFAULT_OAUTH_CALLBACK_PORT
    callback_timeout: float = settings.DEFAULT_OAUTH_CALLBACK_TIMEOUT

    @property
    def redirect_uri(self) -> str:
        return f"http://localhost:{self.callback_port}{settings.OAUTH_CALLBACK_PATH}"


def load_app_config(
    loader: Optional[ConfigLoader] = None,
    network_override: Optional[str] = None,
) -> AppConfig:
    """Read and validate the application configuration

    Args:
        loader: Config loader to read from (defaults to the global instance)
        network_override: Network selector taking precedence over FORTEM_NETWORK

    Returns:
        Validated AppConfig

    Raises:
        ConfigurationError: On an unknown network or missing credentials
    """
    loader = loader or get_config_loader()

    network_name = network_override or loader.get("FORTEM_NETWORK", settings.DEFAULT_NETWORK)
    network = get_network_config(network_name)

    private_key = loader.get("SUI_PRIVATE_KEY", None)
    google_client_id = loader.get("GOOGLE_CLIENT_ID", None)
    poseidon_hash = loader.get("ZKLOGIN_POSEIDON", None)

    if private_key:
        auth_mode = AuthMode.DIRECT_KEY
    elif google_client_id:
        if not poseidon_hash:
            raise ConfigurationError(
                "ZKLOGIN_POSEIDON is required for Google login.\n\n"
                "  Set ZKLOGIN_POSEIDON=package.module:function pointing at a BN254 Poseidon hash\n"
                "  that takes a list of integers and returns an integer."
            )
        auth_mode = AuthMode.ZKLOGIN
    else:
        raise ConfigurationError(MISSING_CREDENTIAL_MESSAGE)

    callback_port = loader.get("OAUTH_CALLBACK_PORT", settings.DEFAULT_OAUTH_CALLBACK_PORT)
    if not 0 < callback_port < 65536:
        raise ConfigurationError(f"OAUTH_CALLBACK_PORT must be a valid TCP port, got: {callback_port}")

    app_config = AppConfig(
        network=network,
        auth_mode=auth_mode,
        sui_private_key=private_key,
        google_client_id=google_client_id,
        google_client_secret=loader.get("GOOGLE_CLIENT_SECRET", None),
        poseidon_hash=poseidon_hash,
        callback_port=callback_port,
        callback_timeout=loader.get("OAUTH_CALLBACK_TIMEOUT", float(settings.DEFAULT_OAUTH_CALLBACK_TIMEOUT)),
    )
    logger.debug(f"Configuration loaded: network={network.name} auth_mode={auth_mode.value}")
    return app_config
