"""Wallet-signature login with the user's own Ed25519 key"""

import logging
import time
from typing import TYPE_CHECKING

from api.models import CheckWalletResponse, LoginResponse, NonceResponse
from exceptions import NotRegisteredError
from signer import Ed25519Signer, SuiEd25519Keypair
from .base import AuthResult, Authenticator, WalletIdentity

if TYPE_CHECKING:
    from api.client import FortemClient

logger = logging.getLogger(__name__)

WALLET_PROVIDER = "WALLET"


def build_login_message(address: str, nonce: str, timestamp: int) -> str:
    """Login challenge text; the backend verifies this exact byte layout"""
    return f'{{"message": "Sui Login for {address}", "timestamp": {timestamp}, "nonce": "{nonce}"}}'


async def login_with_keypair(client: "FortemClient", keypair: SuiEd25519Keypair) -> str:
    """
    Log in by signing a server nonce with the wallet key.

    Args:
        client: Fortem client; no session hooks are used
        keypair: The wallet's keypair

    Returns:
        The access token

    Raises:
        NotRegisteredError: If the address is not a Fortem member
        ApiError: If any auth endpoint fails
    """
    address = keypair.to_sui_address()

    check = await client.post(
        "/api/v1/auth/check-wallet",
        {"walletAddress": address},
        response_model=CheckWalletResponse,
        authenticated=False,
    )
    if not check.exists:
        raise NotRegisteredError(address)

    nonce = (await client.post(
        "/api/v1/auth/nonce",
        {"walletAddress": address},
        response_model=NonceResponse,
        authenticated=False,
    )).nonce

    timestamp = int(time.time() * 1000)
    message = build_login_message(address, nonce, timestamp)
    signed = keypair.sign_personal_message(message.encode("utf-8"))

    login = await client.post(
        "/api/v1/auth/login",
        {
            "walletAddress": address,
            "provider": WALLET_PROVIDER,
            "signature": signed.signature,
            "timestamp": timestamp,
            "nonce": nonce,
            "bytes": signed.bytes,
        },
        response_model=LoginResponse,
        authenticated=False,
    )
    return login.access_token


class DirectKeyAuthenticator(Authenticator):
    """Logs in as the wallet whose private key was configured"""

    def __init__(self, keypair: SuiEd25519Keypair):
        self.keypair = keypair
        self.signer = Ed25519Signer(keypair)

    @classmethod
    def from_private_key(cls, private_key: str) -> "DirectKeyAuthenticator":
        return cls(SuiEd25519Keypair.from_secret_key(private_key))

    async def login(self, client: "FortemClient") -> AuthResult:
        address = self.signer.get_address()
        logger.info(f"Wallet address: {address}")
        logger.info("Logging in...")

        token = await login_with_keypair(client, self.keypair)

        logger.info("Login successful (Ed25519)")
        return AuthResult(access_token=token, identity=WalletIdentity(address=address, signer=self.signer))
