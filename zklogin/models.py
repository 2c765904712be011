"""Data models for zkLogin proofs and signer state"""

from dataclasses import dataclass
from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ProofPoints(_CamelModel):
    """Groth16 proof points as decimal strings"""
    a: List[str]
    b: List[List[str]]
    c: List[str]


class IssBase64Details(_CamelModel):
    """Location of the ``iss`` claim inside the base64 JWT payload"""
    value: str
    index_mod4: int


class ZkProof(_CamelModel):
    """Proving service response, consumed opaquely by the zkLogin signer"""
    proof_points: ProofPoints
    iss_base64_details: IssBase64Details
    header_base64: str


@dataclass(frozen=True)
class ZkLoginState:
    """Everything the zkLogin signer needs besides the ephemeral key

    Attributes:
        wallet_address: zkLogin address derived from the identity token and salt
        address_seed: Decimal Poseidon seed binding the proof to user and app
        max_epoch: Last epoch in which the proof and ephemeral key are valid
        zk_proof: Proof returned by the proving service
    """
    wallet_address: str
    address_seed: str
    max_epoch: int
    zk_proof: ZkProof
