"""Client for the zero-knowledge proving service"""

import logging

import httpx

from exceptions import ProverError
from settings import CONNECT_TIMEOUT, ZKLOGIN_KEY_CLAIM_NAME
from .models import ZkProof

logger = logging.getLogger(__name__)

# Proof generation is CPU-bound on the service side and can take a while
PROVER_TIMEOUT = 60.0


async def fetch_zk_proof(
    prover_url: str,
    jwt: str,
    salt: str,
    extended_ephemeral_public_key: str,
    max_epoch: int,
    jwt_randomness: str,
    key_claim_name: str = ZKLOGIN_KEY_CLAIM_NAME,
) -> ZkProof:
    """Request a zkLogin proof for an identity token

    Args:
        prover_url: Proving service base URL
        jwt: Google ID token whose nonce commits to the ephemeral key
        salt: User salt issued by the backend
        extended_ephemeral_public_key: Decimal flag-prefixed ephemeral public key
        max_epoch: Max epoch committed in the nonce
        jwt_randomness: Randomness committed in the nonce
        key_claim_name: Claim identifying the user

    Returns:
        The parsed proof

    Raises:
        ProverError: On a non-2xx response
    """
    payload = {
        "jwt": jwt,
        "salt": salt,
        "extendedEphemeralPublicKey": extended_ephemeral_public_key,
        "maxEpoch": str(max_epoch),
        "jwtRandomness": jwt_randomness,
        "keyClaimName": key_claim_name,
    }

    logger.info("Requesting zkLogin proof...")
    async with httpx.AsyncClient(timeout=httpx.Timeout(PROVER_TIMEOUT, connect=CONNECT_TIMEOUT)) as client:
        response = await client.post(f"{prover_url.rstrip('/')}/v1", json=payload)

    if not response.is_success:
        raise ProverError(
            f"ZK prover request failed ({response.status_code}): {response.text}",
            status_code=response.status_code,
            body=response.text,
        )

    return ZkProof.model_validate(response.json())
