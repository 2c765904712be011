"""zkLogin nonce, address seed and address derivation

The BN254 Poseidon hash is a cryptographic primitive supplied from outside
(see ``load_poseidon``); everything here only arranges its inputs and
encodes its outputs the way the Sui zkLogin circuit expects.
"""

import base64
import importlib
import logging
import secrets
from typing import Callable, List, Sequence

from oauth.jwt_utils import decode_jwt
from signer.keypair import SuiEd25519Keypair, ZKLOGIN_FLAG, blake2b_256

logger = logging.getLogger(__name__)

PoseidonHash = Callable[[Sequence[int]], int]

NONCE_LENGTH = 27
PACK_WIDTH = 248
MAX_KEY_CLAIM_NAME_LENGTH = 32
MAX_KEY_CLAIM_VALUE_LENGTH = 115
MAX_AUD_VALUE_LENGTH = 145
GOOGLE_ISSUER = "https://accounts.google.com"


def load_poseidon(path: str) -> PoseidonHash:
    """Import a Poseidon hash function from a ``module:function`` path

    Raises:
        ValueError: If the path is malformed or does not name a callable
    """
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Poseidon hash path must look like 'module:function', got: {path!r}")
    module = importlib.import_module(module_name)
    func = getattr(module, attr, None)
    if not callable(func):
        raise ValueError(f"{path} is not callable")
    logger.debug(f"Using Poseidon hash from {path}")
    return func


def _to_padded_big_endian(value: int, width: int) -> bytes:
    """Lowest ``width`` bytes of ``value``, big-endian"""
    return (value % (1 << (8 * width))).to_bytes(width, "big")


def generate_randomness() -> str:
    """128 bits of randomness as a decimal string"""
    return str(int.from_bytes(secrets.token_bytes(16), "big"))


def extended_ephemeral_public_key(keypair: SuiEd25519Keypair) -> str:
    """Flag-prefixed ephemeral public key as a decimal integer string"""
    return str(int.from_bytes(keypair.sui_public_key_bytes(), "big"))


def generate_nonce(
    poseidon: PoseidonHash,
    keypair: SuiEd25519Keypair,
    max_epoch: int,
    randomness: str,
) -> str:
    """Derive the OAuth nonce binding the ephemeral key to the login

    The flag-prefixed public key is split into high and low 128-bit halves,
    hashed with max epoch and randomness, and the low 20 bytes of the hash
    (leading zero bytes stripped) are base64url encoded.

    Raises:
        ValueError: If the encoded nonce does not have the expected length
    """
    public_key = int.from_bytes(keypair.sui_public_key_bytes(), "big")
    digest = poseidon([public_key >> 128, public_key & ((1 << 128) - 1), max_epoch, int(randomness)])
    z = _to_padded_big_endian(digest, 20).lstrip(b"\x00")
    nonce = base64.urlsafe_b64encode(z).decode("ascii").rstrip("=")
    if len(nonce) != NONCE_LENGTH:
        raise ValueError(f"Generated nonce has length {len(nonce)}, expected {NONCE_LENGTH}")
    return nonce


def hash_ascii_str_to_field(poseidon: PoseidonHash, value: str, max_size: int) -> int:
    """Pack a zero-padded ASCII string into 31-byte field elements and hash them

    Chunks are cut from the end of the padded string, so a short chunk, if
    any, comes first.
    """
    if len(value) > max_size:
        raise ValueError(f"String {value} is longer than {max_size} chars")
    padded = value.ljust(max_size, "\x00").encode("latin-1")
    chunk_size = PACK_WIDTH // 8
    first = len(padded) % chunk_size or chunk_size
    chunks = [padded[:first]] + [padded[i:i + chunk_size] for i in range(first, len(padded), chunk_size)]
    packed: List[int] = [int.from_bytes(chunk, "big") for chunk in chunks]
    return poseidon(packed)


def gen_address_seed(
    poseidon: PoseidonHash,
    salt: str,
    name: str,
    value: str,
    aud: str,
) -> int:
    """Address seed for (salt, key claim name, key claim value, audience)"""
    return poseidon([
        hash_ascii_str_to_field(poseidon, name, MAX_KEY_CLAIM_NAME_LENGTH),
        hash_ascii_str_to_field(poseidon, value, MAX_KEY_CLAIM_VALUE_LENGTH),
        hash_ascii_str_to_field(poseidon, aud, MAX_AUD_VALUE_LENGTH),
        poseidon([int(salt)]),
    ])


def normalize_issuer(iss: str) -> str:
    # Google tokens may carry the bare host as issuer
    if iss == "accounts.google.com":
        return GOOGLE_ISSUER
    return iss


def compute_address_from_seed(address_seed: int, iss: str) -> str:
    """zkLogin address: BLAKE2b-256 of ``flag || len(iss) || iss || seed``"""
    iss_bytes = normalize_issuer(iss).encode("utf-8")
    data = bytes([ZKLOGIN_FLAG, len(iss_bytes)]) + iss_bytes + _to_padded_big_endian(address_seed, 32)
    return "0x" + blake2b_256(data).hex()


def single_audience(aud) -> str:
    """zkLogin supports exactly one audience per token"""
    if isinstance(aud, list):
        if len(aud) != 1:
            raise ValueError("Identity token must have exactly one audience")
        return aud[0]
    if not isinstance(aud, str):
        raise ValueError("Identity token audience must be a string")
    return aud


def jwt_to_address(poseidon: PoseidonHash, jwt: str, salt: str) -> str:
    """Derive the zkLogin wallet address for an identity token and user salt

    Raises:
        ValueError: If the token lacks the ``sub``, ``aud`` or ``iss`` claims
    """
    claims = decode_jwt(jwt)
    sub, aud, iss = claims.get("sub"), claims.get("aud"), claims.get("iss")
    if not sub or not aud or not iss:
        raise ValueError("Identity token is missing sub, aud or iss claims")
    seed = gen_address_seed(poseidon, salt, "sub", sub, single_audience(aud))
    return compute_address_from_seed(seed, iss)
