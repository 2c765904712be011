from config.loader import get_config_loader

# Get the config loader instance
config = get_config_loader()

# Logging
LOG_LEVEL = config.get("LOG_LEVEL", "info")
DEBUG_LOG_FILE = config.get("DEBUG_LOG_FILE", "fortem_mcp_debug.log")

# Network selection ("testnet" or "mainnet"), validated in config.app_config
DEFAULT_NETWORK = "testnet"

# Timeout configuration for outbound HTTP calls (seconds)
CONNECT_TIMEOUT = config.get("CONNECT_TIMEOUT", 10.0)
REQUEST_TIMEOUT = config.get("REQUEST_TIMEOUT", 30.0)

# Google OAuth configuration (hardcoded - not user configurable)
# Desktop app OAuth clients accept any localhost port without explicit registration.
GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_SCOPE = "openid email"

# Loopback callback server
OAUTH_CALLBACK_HOST = "localhost"
OAUTH_CALLBACK_PATH = "/callback"
DEFAULT_OAUTH_CALLBACK_PORT = 8898
DEFAULT_OAUTH_CALLBACK_TIMEOUT = 300  # 5 minutes, a human has to act in the browser

# zkLogin
# Proof and ephemeral key stay valid for this many epochs after login
ZKLOGIN_MAX_EPOCH_OFFSET = 10
ZKLOGIN_KEY_CLAIM_NAME = "sub"

# MCP server identity
SERVER_NAME = "fortem-mcp"
SERVER_VERSION = "0.1.0"
