"""Direct-key signer backed by the wallet's own Ed25519 keypair"""

import base64

from .base import SignedMessage, Signer
from .keypair import SuiEd25519Keypair


class Ed25519Signer(Signer):
    """Signs with the user's long-term key"""

    def __init__(self, keypair: SuiEd25519Keypair):
        self.keypair = keypair

    def get_address(self) -> str:
        return self.keypair.to_sui_address()

    async def sign_transaction(self, tx_bytes: str) -> str:
        return self.keypair.sign_transaction(base64.b64decode(tx_bytes))

    async def sign_personal_message(self, message: bytes) -> SignedMessage:
        return self.keypair.sign_personal_message(message)


def create_ed25519_signer(private_key: str) -> Ed25519Signer:
    """Build a direct-key signer from a ``suiprivkey1...`` or base64 key"""
    return Ed25519Signer(SuiEd25519Keypair.from_secret_key(private_key))
