"""Exceptions raised by the Fortem MCP server."""

from typing import Optional


class FortemError(Exception):
    """Base exception for all Fortem MCP errors."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ConfigurationError(FortemError):
    """Raised at startup when required settings are missing or invalid."""


class NotRegisteredError(FortemError):
    """Raised when the wallet address is not a registered Fortem member."""

    def __init__(self, address: str) -> None:
        super().__init__(
            f"Address {address} is not a registered Fortem member. "
            "Please sign up at https://fortem.gg first."
        )
        self.address = address


class OAuthError(FortemError):
    """Raised when the OAuth provider reports an error or the flow fails."""


class OAuthTimeoutError(OAuthError):
    """Raised when no OAuth callback arrives within the allowed window."""


class CallbackServerBindError(OAuthError):
    """Raised when the loopback callback server cannot bind its port."""


class UpstreamError(FortemError):
    """Non-2xx response from an upstream service; keeps the response body."""

    def __init__(self, message: str, status_code: int, body: str) -> None:
        super().__init__(message, status_code=status_code)
        self.body = body


class TokenExchangeError(UpstreamError):
    """Raised when the OAuth code cannot be exchanged for an ID token."""


class ProverError(UpstreamError):
    """Raised when the zero-knowledge proving service rejects a request."""


class ApiError(UpstreamError):
    """Raised when the Fortem API returns a non-2xx response."""


class AuthenticationError(ApiError):
    """Raised when a request is still unauthorized after re-authenticating."""


class NotAuthenticatedError(FortemError):
    """Raised when the wallet identity is read before any login completed."""
