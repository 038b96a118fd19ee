"""
Network configuration for the Starknet RPC client.
"""
import json
import logging
import os
from importlib import resources
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class NetworkConfig:
    """
    Named Starknet networks and their RPC endpoints.

    The table ships with the package as ``networks.json`` and is loaded once.
    """

    _networks_cache: Optional[Dict[str, Dict[str, Any]]] = None

    @classmethod
    def load_networks(cls) -> Dict[str, Dict[str, Any]]:
        """
        Load the network table, caching it after the first read.

        Returns:
            Mapping of network name to its configuration
        """
        if cls._networks_cache is None:
            text = resources.files("starknet_rpc").joinpath("networks.json").read_text(encoding="utf-8")
            cls._networks_cache = json.loads(text)
            logger.debug(f"Loaded {len(cls._networks_cache)} network definitions")
        return cls._networks_cache

    @classmethod
    def get_network(cls, name: str) -> Dict[str, Any]:
        """
        Get the configuration of a named network.

        Raises:
            ValueError: If the network is unknown
        """
        networks = cls.load_networks()
        if name not in networks:
            available = ", ".join(sorted(networks))
            raise ValueError(f"Unknown network '{name}'. Available networks: {available}")
        return networks[name]

    @classmethod
    def get_rpc_url(cls, name: str, override: Optional[str] = None) -> str:
        """
        Resolve the RPC URL of a network.

        Resolution order: ``override``, then the ``<NAME>_RPC_URL`` environment
        variable (dashes become underscores), then the packaged table.
        """
        if override:
            return override
        network = cls.get_network(name)
        env_var = f"{name.upper().replace('-', '_')}_RPC_URL"
        env_url = os.environ.get(env_var)
        if env_url:
            logger.debug(f"Using RPC URL from {env_var}")
            return env_url
        return network["rpc"]

    @classmethod
    def get_chain_id(cls, name: str) -> str:
        """Get the chain id of a network (e.g. ``SN_MAIN``)."""
        return cls.get_network(name)["chainId"]
