"""
Transaction and message signers for Sui wallets
"""
from .base import SignedMessage, Signer
from .keypair import (
    ED25519_FLAG,
    ZKLOGIN_FLAG,
    IntentScope,
    SuiEd25519Keypair,
    decode_private_key,
    encode_private_key,
)
from .ed25519 import Ed25519Signer, create_ed25519_signer
from .zklogin import ZkLoginSigner, serialize_zklogin_signature

__all__ = [
    # Interface
    "SignedMessage",
    "Signer",
    # Keypair
    "ED25519_FLAG",
    "ZKLOGIN_FLAG",
    "IntentScope",
    "SuiEd25519Keypair",
    "decode_private_key",
    "encode_private_key",
    # Variants
    "Ed25519Signer",
    "create_ed25519_signer",
    "ZkLoginSigner",
    "serialize_zklogin_signature",
]
