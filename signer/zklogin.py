"""zkLogin signer

Transactions are signed with the ephemeral keypair generated at login. The
resulting user signature is wrapped together with the zero-knowledge proof,
the address seed and the max epoch into a ``ZkLoginSignature`` that the Sui
verifier accepts for the zkLogin address.
"""

import base64

from zklogin.models import ZkLoginState, ZkProof
from . import bcs
from .base import SignedMessage, Signer
from .keypair import ZKLOGIN_FLAG, SuiEd25519Keypair


def serialize_zklogin_signature(
    zk_proof: ZkProof,
    address_seed: str,
    max_epoch: int,
    user_signature: str,
) -> str:
    """BCS-serialize a ZkLoginSignature and prefix it with the zkLogin flag

    Field order follows the on-chain struct: inputs (proof points, iss
    details, header, address seed), max epoch, user signature bytes.

    Args:
        zk_proof: Proof from the proving service
        address_seed: Decimal address seed
        max_epoch: Max epoch the proof was generated for
        user_signature: Base64 serialized ephemeral-key signature

    Returns:
        Base64 serialized zkLogin signature
    """
    points = zk_proof.proof_points
    inputs = b"".join([
        bcs.string_vector(points.a),
        bcs.uleb128(len(points.b)) + b"".join(bcs.string_vector(row) for row in points.b),
        bcs.string_vector(points.c),
        bcs.string(zk_proof.iss_base64_details.value),
        bcs.u8(zk_proof.iss_base64_details.index_mod4),
        bcs.string(zk_proof.header_base64),
        bcs.string(address_seed),
    ])
    body = inputs + bcs.u64(max_epoch) + bcs.byte_vector(base64.b64decode(user_signature))
    return base64.b64encode(bytes([ZKLOGIN_FLAG]) + body).decode("ascii")


class ZkLoginSigner(Signer):
    """Signs for a zkLogin address using the session's ephemeral key"""

    def __init__(self, ephemeral_keypair: SuiEd25519Keypair, state: ZkLoginState):
        self.ephemeral_keypair = ephemeral_keypair
        self.state = state

    def get_address(self) -> str:
        return self.state.wallet_address

    async def sign_transaction(self, tx_bytes: str) -> str:
        user_signature = self.ephemeral_keypair.sign_transaction(base64.b64decode(tx_bytes))
        return serialize_zklogin_signature(
            self.state.zk_proof,
            self.state.address_seed,
            self.state.max_epoch,
            user_signature,
        )

    async def sign_personal_message(self, message: bytes) -> SignedMessage:
        return self.ephemeral_keypair.sign_personal_message(message)
