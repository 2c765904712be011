"""Login strategies and the lazy session built on top of them"""

from .base import AuthResult, Authenticator, WalletIdentity
from .direct_key import DirectKeyAuthenticator, build_login_message, login_with_keypair
from .zk_login import ZkLoginAuthenticator
from .session import Session, SessionInitializer, SessionSigner
from .factory import create_authenticator

__all__ = [
    "AuthResult",
    "Authenticator",
    "WalletIdentity",
    "DirectKeyAuthenticator",
    "build_login_message",
    "login_with_keypair",
    "ZkLoginAuthenticator",
    "Session",
    "SessionInitializer",
    "SessionSigner",
    "create_authenticator",
]
