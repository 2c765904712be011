"""PKCE (Proof Key for Code Exchange) generation and verification"""

import base64
import hashlib
import hmac
import secrets
from typing import NamedTuple


class PKCEPair(NamedTuple):
    """PKCE code verifier and challenge pair"""
    verifier: str
    challenge: str


def compute_challenge(verifier: str) -> str:
    """S256 challenge: base64url(SHA-256(verifier)) without padding"""
    challenge_bytes = hashlib.sha256(verifier.encode('utf-8')).digest()
    return base64.urlsafe_b64encode(challenge_bytes).decode('utf-8').rstrip('=')


def generate_pkce() -> PKCEPair:
    """
    Generate PKCE code verifier and challenge.

    RFC 7636 PKCE standard:
    - Verifier: 43-128 characters, base64url encoded (32 bytes -> 43 chars)
    - Challenge: SHA-256 hash of verifier, base64url encoded

    Returns:
        PKCEPair: Tuple of (verifier, challenge)
    """
    verifier = base64.urlsafe_b64encode(secrets.token_bytes(32)).decode('utf-8').rstrip('=')
    return PKCEPair(verifier=verifier, challenge=compute_challenge(verifier))


def verify_pkce(verifier: str, challenge: str) -> bool:
    """Check that a verifier hashes to the given challenge"""
    return hmac.compare_digest(compute_challenge(verifier), challenge)
