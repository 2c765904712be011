"""Endpoint sets for the supported Fortem networks"""

from dataclasses import dataclass
from typing import Dict

from exceptions import ConfigurationError


@dataclass(frozen=True)
class NetworkConfig:
    """Resolved endpoints for one network

    Attributes:
        name: Network selector value ("testnet" or "mainnet")
        api_url: Fortem REST API base URL
        prover_url: zkLogin proving service base URL
        sui_network: Sui chain network id
        rpc_url: Sui full node JSON-RPC URL
    """
    name: str
    api_url: str
    prover_url: str
    sui_network: str
    rpc_url: str


NETWORKS: Dict[str, NetworkConfig] = {
    "testnet": NetworkConfig(
        name="testnet",
        api_url="https://testnet-api.fortem.gg",
        prover_url="https://dev-prover.fortem.gg",
        sui_network="testnet",
        rpc_url="https://fullnode.testnet.sui.io:443",
    ),
    "mainnet": NetworkConfig(
        name="mainnet",
        api_url="https://api.fortem.gg",
        prover_url="https://prover.fortem.gg",
        sui_network="mainnet",
        rpc_url="https://fullnode.mainnet.sui.io:443",
    ),
}


def get_network_config(network: str) -> NetworkConfig:
    """Look up the endpoint set for a network selector

    Raises:
        ConfigurationError: If the selector is not a recognized network
    """
    try:
        return NETWORKS[network]
    except KeyError:
        raise ConfigurationError(
            f'FORTEM_NETWORK must be "testnet" or "mainnet", got: "{network}"'
        ) from None
