"""Configuration management package for fortem-mcp"""

from .loader import ConfigLoader, get_config_loader
from .network import NETWORKS, NetworkConfig, get_network_config

__all__ = [
    "ConfigLoader",
    "get_config_loader",
    "NETWORKS",
    "NetworkConfig",
    "get_network_config",
]
