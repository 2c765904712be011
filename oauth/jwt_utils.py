"""
JWT payload decoding for identity tokens
"""
import base64
import json
from typing import Any, Dict


def decode_jwt(token: str) -> Dict[str, Any]:
    """
    Decode JWT token without verification.

    Note: This only decodes the payload, does not verify signature. The
    identity token is verified by the zkLogin circuit, not here.

    Args:
        token: JWT identity token

    Returns:
        Decoded JWT payload as dictionary

    Raises:
        ValueError: If the token is not a well-formed JWT
    """
    # JWT structure: header.payload.signature
    parts = token.split(".")
    if len(parts) != 3:
        raise ValueError(f"Invalid JWT format: expected 3 parts, got {len(parts)}")

    payload = parts[1]

    # Add padding if needed (JWT uses base64url without padding)
    padding = 4 - (len(payload) % 4)
    if padding != 4:
        payload += "=" * padding

    try:
        claims = json.loads(base64.urlsafe_b64decode(payload).decode("utf-8"))
    except (ValueError, UnicodeDecodeError) as e:
        raise ValueError(f"Invalid JWT payload: {e}") from e

    if not isinstance(claims, dict):
        raise ValueError("Invalid JWT payload: expected a JSON object")
    return claims
