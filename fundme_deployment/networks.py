from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, NamedTuple, Optional

from eth_utils import is_address

from fundme_deployment.constants import DEVELOPMENT_CHAINS, NETWORK_CONFIG
from fundme_deployment.utils import _load_yaml

ChainId = int
NetworkName = str


class NetworkIdentity(NamedTuple):
    """The network targeted by a single deployment run."""

    name: NetworkName
    chain_id: ChainId
    required_confirmations: Optional[int] = None


class NetworkConfigEntry(NamedTuple):
    name: NetworkName
    eth_usd_price_feed: str


class NetworkConfigRegistry:
    """
    Read-only lookup of per-chain deployment parameters plus the
    classification of development (ephemeral) networks.
    """

    class NotConfigured(ValueError):
        """Raised when a chain id has no registry entry"""

    def __init__(
        self,
        entries: Mapping[ChainId, NetworkConfigEntry],
        development_chains: Iterable[NetworkName] = DEVELOPMENT_CHAINS,
    ):
        self._entries = MappingProxyType(dict(entries))
        self._development_chains = frozenset(development_chains)

    @property
    def entries(self) -> Mapping[ChainId, NetworkConfigEntry]:
        return self._entries

    @property
    def development_chains(self) -> frozenset:
        return self._development_chains

    def config_for(self, chain_id: ChainId) -> NetworkConfigEntry:
        try:
            return self._entries[chain_id]
        except KeyError:
            raise self.NotConfigured(f"No network configuration for chain id {chain_id}.")

    def is_development_chain(self, name: NetworkName) -> bool:
        return name in self._development_chains

    @classmethod
    def from_config(cls, config: dict) -> "NetworkConfigRegistry":
        """Builds a registry from a params dictionary (see constructor_params/fundme.yml)."""
        if not config:
            raise ValueError("Empty network params.")

        networks = config.get("networks")
        if not networks:
            raise ValueError("Network params file missing 'networks' field.")

        entries = dict()
        for chain_id, network_data in networks.items():
            if not isinstance(network_data, dict):
                raise ValueError(f"Malformed network params for chain id {chain_id}.")
            price_feed = network_data.get("eth_usd_price_feed")
            if not price_feed:
                raise ValueError(f"eth_usd_price_feed is not set for chain id {chain_id}.")
            if not is_address(price_feed):
                raise ValueError(
                    f"Invalid eth_usd_price_feed address '{price_feed}' for chain id {chain_id}."
                )
            entries[int(chain_id)] = NetworkConfigEntry(
                name=network_data.get("name", str(chain_id)),
                eth_usd_price_feed=price_feed,
            )

        development_chains = config.get("development_chains", list(DEVELOPMENT_CHAINS))
        if not isinstance(development_chains, list) or not all(
            isinstance(name, str) for name in development_chains
        ):
            raise ValueError("'development_chains' must be a list of network names.")
        return cls(entries=entries, development_chains=development_chains)

    @classmethod
    def from_yaml(cls, filepath: Path) -> "NetworkConfigRegistry":
        config = _load_yaml(filepath)
        return cls.from_config(config)

    @classmethod
    def load(cls, filepath: Optional[Path] = None) -> "NetworkConfigRegistry":
        """Loads a params file if one is given, otherwise the built-in network table."""
        if filepath is None:
            return cls.default()
        return cls.from_yaml(filepath)

    @classmethod
    def default(cls) -> "NetworkConfigRegistry":
        entries = {
            chain_id: NetworkConfigEntry(**network_data)
            for chain_id, network_data in NETWORK_CONFIG.items()
        }
        return cls(entries=entries)
