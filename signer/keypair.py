"""Sui Ed25519 keypair on top of the ``cryptography`` primitives

Sui signs the BLAKE2b-256 digest of an intent-prefixed payload and
serializes signatures as ``flag || signature || public_key``.
"""

import base64
import hashlib
from enum import IntEnum

import bech32
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, NoEncryption, PrivateFormat, PublicFormat

from . import bcs
from .base import SignedMessage

ED25519_FLAG = 0x00
ZKLOGIN_FLAG = 0x05
PRIVATE_KEY_HRP = "suiprivkey"
SECRET_KEY_SIZE = 32


class IntentScope(IntEnum):
    """Intent scopes used in the signing prefix"""
    TRANSACTION_DATA = 0
    PERSONAL_MESSAGE = 3


def blake2b_256(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=32).digest()


def intent_message(scope: IntentScope, payload: bytes) -> bytes:
    """Prefix a payload with ``[scope, version=0, app_id=0]``"""
    return bytes([scope, 0, 0]) + payload


def decode_private_key(value: str) -> bytes:
    """Decode a Sui private key into its 32-byte Ed25519 secret

    Accepts the Bech32 ``suiprivkey1...`` export format as well as base64 of
    either the raw 32-byte secret or ``flag || secret`` (legacy keystore).

    Raises:
        ValueError: If the key cannot be decoded or is not an Ed25519 key
    """
    value = value.strip()
    if value.startswith(PRIVATE_KEY_HRP):
        hrp, data = bech32.bech32_decode(value)
        if hrp != PRIVATE_KEY_HRP or data is None:
            raise ValueError("Invalid suiprivkey: Bech32 checksum or prefix mismatch")
        decoded = bech32.convertbits(data, 5, 8, False)
        if decoded is None:
            raise ValueError("Invalid suiprivkey: malformed payload")
        raw = bytes(decoded)
    else:
        try:
            raw = base64.b64decode(value, validate=True)
        except ValueError as e:
            raise ValueError(f"Private key is neither suiprivkey nor base64: {e}") from e
        if len(raw) == SECRET_KEY_SIZE:
            return raw

    if len(raw) != SECRET_KEY_SIZE + 1:
        raise ValueError(f"Private key must be {SECRET_KEY_SIZE} bytes plus a scheme flag, got {len(raw)} bytes")
    if raw[0] != ED25519_FLAG:
        raise ValueError(f"Only Ed25519 keys are supported (scheme flag {raw[0]:#04x})")
    return raw[1:]


def encode_private_key(secret: bytes) -> str:
    """Encode a 32-byte Ed25519 secret in the ``suiprivkey1...`` format"""
    data = bech32.convertbits(bytes([ED25519_FLAG]) + secret, 8, 5)
    return bech32.bech32_encode(PRIVATE_KEY_HRP, data)


class SuiEd25519Keypair:
    """Ed25519 keypair with Sui address derivation and intent signing"""

    def __init__(self, private_key: Ed25519PrivateKey):
        self._private_key = private_key
        self._public_key = private_key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)

    @classmethod
    def generate(cls) -> "SuiEd25519Keypair":
        return cls(Ed25519PrivateKey.generate())

    @classmethod
    def from_secret_key(cls, secret_key: str) -> "SuiEd25519Keypair":
        return cls(Ed25519PrivateKey.from_private_bytes(decode_private_key(secret_key)))

    def public_key_bytes(self) -> bytes:
        return self._public_key

    def sui_public_key_bytes(self) -> bytes:
        """Public key prefixed with the Ed25519 scheme flag"""
        return bytes([ED25519_FLAG]) + self._public_key

    def to_sui_address(self) -> str:
        return "0x" + blake2b_256(self.sui_public_key_bytes()).hex()

    def sign_with_intent(self, payload: bytes, scope: IntentScope) -> str:
        """Sign an intent message and return the serialized signature"""
        digest = blake2b_256(intent_message(scope, payload))
        signature = self._private_key.sign(digest)
        return base64.b64encode(bytes([ED25519_FLAG]) + signature + self._public_key).decode("ascii")

    def sign_transaction(self, tx_bytes: bytes) -> str:
        return self.sign_with_intent(tx_bytes, IntentScope.TRANSACTION_DATA)

    def sign_personal_message(self, message: bytes) -> SignedMessage:
        signature = self.sign_with_intent(bcs.byte_vector(message), IntentScope.PERSONAL_MESSAGE)
        return SignedMessage(
            bytes=base64.b64encode(message).decode("ascii"),
            signature=signature,
        )

    def export_private_key(self) -> str:
        secret = self._private_key.private_bytes(Encoding.Raw, PrivateFormat.Raw, NoEncryption())
        return encode_private_key(secret)

