"""zkLogin helpers: proof models, derivations, prover and chain queries"""

from .models import IssBase64Details, ProofPoints, ZkLoginState, ZkProof
from .derivation import (
    PoseidonHash,
    compute_address_from_seed,
    extended_ephemeral_public_key,
    gen_address_seed,
    generate_nonce,
    generate_randomness,
    hash_ascii_str_to_field,
    jwt_to_address,
    load_poseidon,
)
from .prover import fetch_zk_proof
from .chain import get_current_epoch

__all__ = [
    "IssBase64Details",
    "ProofPoints",
    "ZkLoginState",
    "ZkProof",
    "PoseidonHash",
    "compute_address_from_seed",
    "extended_ephemeral_public_key",
    "gen_address_seed",
    "generate_nonce",
    "generate_randomness",
    "hash_ascii_str_to_field",
    "jwt_to_address",
    "load_poseidon",
    "fetch_zk_proof",
    "get_current_epoch",
]
