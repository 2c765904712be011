"""
Shared types for the login strategies.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from signer import Signer

if TYPE_CHECKING:
    from api.client import FortemClient


@dataclass(frozen=True)
class WalletIdentity:
    """The wallet the server acts as

    Attributes:
        address: 0x-prefixed Sui address
        signer: Signer bound to that address
    """
    address: str
    signer: Signer


@dataclass(frozen=True)
class AuthResult:
    """Outcome of one successful login"""
    access_token: str
    identity: WalletIdentity


class Authenticator(ABC):
    """A login strategy producing an access token and a ready signer"""

    @abstractmethod
    async def login(self, client: "FortemClient") -> AuthResult:
        """Run one complete login attempt

        Calls on ``client`` must pass ``authenticated=False``: the attempt
        runs inside the session initializer, so it must not re-enter it.
        """
