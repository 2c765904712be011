"""Google OAuth (authorization code + PKCE) for zkLogin"""

from .pkce import PKCEPair, compute_challenge, generate_pkce, verify_pkce
from .authorization import AuthorizationFlow, create_authorization_flow, open_browser
from .callback_server import CaptureState, OAuthCallbackServer, wait_for_authorization_code
from .token_exchange import exchange_code_for_id_token
from .jwt_utils import decode_jwt
from .google import get_google_id_token

__all__ = [
    # PKCE
    "PKCEPair",
    "compute_challenge",
    "generate_pkce",
    "verify_pkce",
    # Authorization
    "AuthorizationFlow",
    "create_authorization_flow",
    "open_browser",
    # Callback Server
    "CaptureState",
    "OAuthCallbackServer",
    "wait_for_authorization_code",
    # Token Exchange
    "exchange_code_for_id_token",
    # JWT Utilities
    "decode_jwt",
    # Flow
    "get_google_id_token",
]
