"""Fortem REST API client and payload models"""

from .client import FortemClient, SessionHooks
from .models import (
    ApiEnvelope,
    ApiKeyResponse,
    CheckWalletResponse,
    FortemModel,
    KioskExistsResponse,
    LoginResponse,
    NonceResponse,
    SaltResponse,
    TxResponse,
)

__all__ = [
    "FortemClient",
    "SessionHooks",
    "ApiEnvelope",
    "ApiKeyResponse",
    "CheckWalletResponse",
    "FortemModel",
    "KioskExistsResponse",
    "LoginResponse",
    "NonceResponse",
    "SaltResponse",
    "TxResponse",
]
