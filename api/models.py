"""
Pydantic models for Fortem API payloads used by the auth flow and tools.
"""
from typing import Any, Generic, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class FortemModel(BaseModel):
    """Fortem speaks camelCase JSON; fields are snake_case in Python"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class ApiEnvelope(FortemModel, Generic[T]):
    """Common response wrapper: callers only ever see ``data``"""
    status_code: Optional[int] = None
    data: Optional[T] = None
    metadata: Optional[Any] = None


class TxResponse(FortemModel):
    """Result of a prepare endpoint; ``tx_bytes`` is signed as-is"""
    tx_id: str
    tx_bytes: str
    cost: Optional[Union[str, float]] = None
    cost_token_symbol: Optional[str] = None
    gas_budget: Optional[int] = None


class CheckWalletResponse(FortemModel):
    exists: bool
    wallet_address: Optional[str] = None


class NonceResponse(FortemModel):
    nonce: str


class LoginResponse(FortemModel):
    access_token: str
    nickname: Optional[str] = None
    profile_image: Optional[str] = None


class SaltResponse(FortemModel):
    """Per-user zkLogin salt plus the identity claims it was issued for"""
    salt: str
    sub: str
    aud: str
    iss: str


class ApiKeyResponse(FortemModel):
    api_key: str


class KioskExistsResponse(FortemModel):
    exists: bool
