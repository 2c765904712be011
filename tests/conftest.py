"""Shared fixtures for the Fortem MCP tests."""

import base64
import json
import socket
from typing import Any, Dict

import pytest

from signer import SuiEd25519Keypair

# BN254 scalar field modulus
FIELD_MODULUS = 21888242871839275222246405745257275088548364400416034343698204186575808495617


def fake_poseidon(inputs) -> int:
    """Deterministic stand-in for the Poseidon hash.

    Bit 159 is always set so the 20-byte nonce digest has no leading zero
    byte, which keeps generated nonces at their full length.
    """
    acc = 7
    for i, value in enumerate(inputs):
        acc = (acc * 31 + (i + 1) * int(value)) % FIELD_MODULUS
    return acc | (1 << 159)


def envelope(data: Any) -> Dict[str, Any]:
    """Wrap data the way the Fortem API does."""
    return {"statusCode": 200, "data": data}


def make_jwt(claims: Dict[str, Any]) -> str:
    """Unsigned JWT with the given claims."""
    def encode(part: Dict[str, Any]) -> str:
        return base64.urlsafe_b64encode(json.dumps(part).encode()).decode().rstrip("=")

    return f"{encode({'alg': 'RS256', 'typ': 'JWT'})}.{encode(claims)}.c2lnbmF0dXJl"


def free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture
def api_url() -> str:
    """Test API base URL."""
    return "http://fortem.test"


@pytest.fixture
def secret_key() -> str:
    """Base64 of a fixed 32-byte Ed25519 secret."""
    return base64.b64encode(bytes(range(32))).decode()


@pytest.fixture
def keypair(secret_key: str) -> SuiEd25519Keypair:
    return SuiEd25519Keypair.from_secret_key(secret_key)


@pytest.fixture
def poseidon():
    return fake_poseidon
