"""
Signer interface shared by the direct-key and zkLogin strategies.
Tools depend on this contract only, never on a concrete variant.
"""
from abc import ABC, abstractmethod
from typing import NamedTuple


class SignedMessage(NamedTuple):
    """Personal message signature in the wallet's wire format

    Attributes:
        bytes: Base64 of the signed message bytes
        signature: Base64 serialized Sui signature
    """
    bytes: str
    signature: str


class Signer(ABC):
    """Signs Sui transactions and personal messages for one wallet"""

    @abstractmethod
    def get_address(self) -> str:
        """Return the 0x-prefixed Sui address of the wallet"""

    @abstractmethod
    async def sign_transaction(self, tx_bytes: str) -> str:
        """Sign base64 transaction bytes

        Args:
            tx_bytes: Base64 transaction bytes exactly as returned by a prepare endpoint

        Returns:
            Base64 serialized signature accepted by the chain
        """

    @abstractmethod
    async def sign_personal_message(self, message: bytes) -> SignedMessage:
        """Sign arbitrary bytes as a Sui personal message"""
