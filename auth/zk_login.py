"""
Google OAuth + zkLogin authentication.

Each attempt generates a fresh ephemeral keypair, commits it into the OAuth
nonce, obtains a Google ID token through the loopback PKCE flow and trades it
for a zero-knowledge proof. Nothing is reused between attempts.
"""
import logging
from typing import TYPE_CHECKING, Awaitable, Callable, Optional

from api.models import LoginResponse, SaltResponse
from config.network import NetworkConfig
from oauth import get_google_id_token
from settings import DEFAULT_OAUTH_CALLBACK_PORT, DEFAULT_OAUTH_CALLBACK_TIMEOUT, ZKLOGIN_KEY_CLAIM_NAME, ZKLOGIN_MAX_EPOCH_OFFSET
from signer import SuiEd25519Keypair, ZkLoginSigner
from zklogin import (
    PoseidonHash,
    ZkLoginState,
    extended_ephemeral_public_key,
    fetch_zk_proof,
    gen_address_seed,
    generate_nonce,
    generate_randomness,
    get_current_epoch,
    jwt_to_address,
)
from .base import AuthResult, Authenticator, WalletIdentity

if TYPE_CHECKING:
    from api.client import FortemClient

logger = logging.getLogger(__name__)

GOOGLE_PROVIDER = "GOOGLE"

IdTokenProvider = Callable[..., Awaitable[str]]
EpochProvider = Callable[[str], Awaitable[int]]


class ZkLoginAuthenticator(Authenticator):
    """Logs in through Google and signs with a zkLogin ephemeral key

    Args:
        network: Endpoint set (API, prover, Sui RPC)
        poseidon: BN254 Poseidon hash used by the nonce and seed derivations
        client_id: Google OAuth client id
        client_secret: Google OAuth client secret, if the client has one
        callback_port: Loopback port for the OAuth redirect
        callback_timeout: Seconds to wait for the browser login
        get_id_token: Runs the browser flow; replaceable for headless use
        fetch_epoch: Returns the current Sui epoch for an RPC URL
    """

    def __init__(
        self,
        network: NetworkConfig,
        poseidon: PoseidonHash,
        client_id: str,
        client_secret: Optional[str] = None,
        callback_port: int = DEFAULT_OAUTH_CALLBACK_PORT,
        callback_timeout: float = DEFAULT_OAUTH_CALLBACK_TIMEOUT,
        get_id_token: IdTokenProvider = get_google_id_token,
        fetch_epoch: EpochProvider = get_current_epoch,
    ):
        self.network = network
        self.poseidon = poseidon
        self.client_id = client_id
        self.client_secret = client_secret
        self.callback_port = callback_port
        self.callback_timeout = callback_timeout
        self.get_id_token = get_id_token
        self.fetch_epoch = fetch_epoch

    async def login(self, client: "FortemClient") -> AuthResult:
        epoch = await self.fetch_epoch(self.network.rpc_url)
        max_epoch = epoch + ZKLOGIN_MAX_EPOCH_OFFSET

        ephemeral_keypair = SuiEd25519Keypair.generate()
        randomness = generate_randomness()
        nonce = generate_nonce(self.poseidon, ephemeral_keypair, max_epoch, randomness)
        logger.debug(f"zkLogin attempt: epoch={epoch} max_epoch={max_epoch}")

        id_token = await self.get_id_token(
            nonce=nonce,
            client_id=self.client_id,
            client_secret=self.client_secret,
            port=self.callback_port,
            timeout=self.callback_timeout,
        )

        salt = await client.post(
            "/api/v1/auth/salt",
            {"jwt": id_token},
            response_model=SaltResponse,
            authenticated=False,
        )

        wallet_address = jwt_to_address(self.poseidon, id_token, salt.salt)
        logger.info(f"Wallet address: {wallet_address}")

        zk_proof = await fetch_zk_proof(
            self.network.prover_url,
            jwt=id_token,
            salt=salt.salt,
            extended_ephemeral_public_key=extended_ephemeral_public_key(ephemeral_keypair),
            max_epoch=max_epoch,
            jwt_randomness=randomness,
        )

        address_seed = gen_address_seed(self.poseidon, salt.salt, ZKLOGIN_KEY_CLAIM_NAME, salt.sub, salt.aud)
        signer = ZkLoginSigner(
            ephemeral_keypair,
            ZkLoginState(
                wallet_address=wallet_address,
                address_seed=str(address_seed),
                max_epoch=max_epoch,
                zk_proof=zk_proof,
            ),
        )

        login = await client.post(
            "/api/v1/auth/login",
            {"walletAddress": wallet_address, "provider": GOOGLE_PROVIDER, "sub": salt.sub},
            response_model=LoginResponse,
            authenticated=False,
        )

        logger.info("Login successful (zkLogin)")
        return AuthResult(
            access_token=login.access_token,
            identity=WalletIdentity(address=wallet_address, signer=signer),
        )
