import pytest

from fundme_deployment.constants import (
    DEFAULT_PARAMS_FILEPATH,
    MAINNET_CHAIN_ID,
    NETWORK_CONFIG,
    SEPOLIA_CHAIN_ID,
)
from fundme_deployment.networks import NetworkConfigEntry, NetworkConfigRegistry

SEPOLIA_FEED = "0x694AA1769357215DE4FAC081bf1f309aDC325306"
VALID_NETWORKS = {1: {"eth_usd_price_feed": SEPOLIA_FEED}}


def test_config_for_registered_chain(registry):
    entry = registry.config_for(11155111)
    assert entry == NetworkConfigEntry(name="sepolia", eth_usd_price_feed="0xFEED")


def test_config_for_unknown_chain(registry):
    with pytest.raises(NetworkConfigRegistry.NotConfigured, match="chain id 1"):
        registry.config_for(1)

    # NotConfigured is a ValueError like the rest of the configuration errors
    assert issubclass(NetworkConfigRegistry.NotConfigured, ValueError)


def test_is_development_chain(registry):
    assert registry.is_development_chain("hardhat")
    assert registry.is_development_chain("localhost")
    assert not registry.is_development_chain("sepolia")
    assert not registry.is_development_chain("Hardhat")


def test_registry_is_read_only(registry):
    with pytest.raises(TypeError):
        registry.entries[1] = NetworkConfigEntry(name="mainnet", eth_usd_price_feed="0x01")
    assert 1 not in registry.entries
    assert isinstance(registry.development_chains, frozenset)


def test_registry_copies_its_entries():
    entries = {5: NetworkConfigEntry(name="goerli", eth_usd_price_feed="0x05")}
    registry = NetworkConfigRegistry(entries=entries)
    entries[6] = NetworkConfigEntry(name="other", eth_usd_price_feed="0x06")
    assert 6 not in registry.entries


def test_default_registry():
    registry = NetworkConfigRegistry.default()
    assert registry.config_for(SEPOLIA_CHAIN_ID).eth_usd_price_feed == SEPOLIA_FEED
    assert set(registry.entries) == set(NETWORK_CONFIG)
    assert MAINNET_CHAIN_ID not in registry.entries
    for name in ("hardhat", "localhost", "local"):
        assert registry.is_development_chain(name)


def test_bundled_params_file_matches_defaults():
    registry = NetworkConfigRegistry.from_yaml(DEFAULT_PARAMS_FILEPATH)
    assert dict(registry.entries) == dict(NetworkConfigRegistry.default().entries)
    assert registry.development_chains == NetworkConfigRegistry.default().development_chains


def test_from_yaml(tmp_path):
    filepath = tmp_path / "params.yml"
    filepath.write_text(
        f"""
development_chains: [anvil]
networks:
  11155111:
    name: sepolia
    eth_usd_price_feed: "{SEPOLIA_FEED}"
"""
    )
    registry = NetworkConfigRegistry.from_yaml(filepath)
    assert registry.config_for(11155111) == NetworkConfigEntry("sepolia", SEPOLIA_FEED)
    assert registry.is_development_chain("anvil")
    assert not registry.is_development_chain("hardhat")


def test_from_config_defaults_development_chains():
    config = {"networks": {"137": {"eth_usd_price_feed": SEPOLIA_FEED}}}
    registry = NetworkConfigRegistry.from_config(config)
    # chain ids from YAML may be strings
    assert registry.config_for(137).name == "137"
    assert registry.is_development_chain("hardhat")


@pytest.mark.parametrize(
    "config, message",
    [
        (None, "Empty network params"),
        ({"development_chains": ["hardhat"]}, "missing 'networks'"),
        ({"networks": {1: "0xabc"}}, "Malformed network params"),
        ({"networks": {1: {"name": "mainnet"}}}, "eth_usd_price_feed is not set"),
        ({"networks": {1: {"eth_usd_price_feed": "0xFEED"}}}, "Invalid eth_usd_price_feed"),
        (
            {"development_chains": "hardhat", "networks": VALID_NETWORKS},
            "'development_chains' must be a list of network names",
        ),
        (
            {"development_chains": None, "networks": VALID_NETWORKS},
            "'development_chains' must be a list of network names",
        ),
        (
            {"development_chains": [31337], "networks": VALID_NETWORKS},
            "'development_chains' must be a list of network names",
        ),
    ],
)
def test_from_config_rejects_malformed_params(config, message):
    with pytest.raises(ValueError, match=message):
        NetworkConfigRegistry.from_config(config)


def test_from_yaml_rejects_scalar_development_chains(tmp_path):
    filepath = tmp_path / "params.yml"
    filepath.write_text(
        f"""
development_chains: hardhat
networks:
  11155111:
    eth_usd_price_feed: "{SEPOLIA_FEED}"
"""
    )
    with pytest.raises(ValueError, match="'development_chains' must be a list"):
        NetworkConfigRegistry.from_yaml(filepath)


def test_from_yaml_rejects_empty_development_chains(tmp_path):
    filepath = tmp_path / "params.yml"
    filepath.write_text(
        f"""
development_chains:
networks:
  11155111:
    eth_usd_price_feed: "{SEPOLIA_FEED}"
"""
    )
    with pytest.raises(ValueError, match="'development_chains' must be a list"):
        NetworkConfigRegistry.from_yaml(filepath)


def test_load_without_params_uses_defaults():
    registry = NetworkConfigRegistry.load()
    assert dict(registry.entries) == dict(NetworkConfigRegistry.default().entries)


def test_load_with_params(tmp_path):
    filepath = tmp_path / "params.yml"
    filepath.write_text(f"networks:\n  5:\n    eth_usd_price_feed: \"{SEPOLIA_FEED}\"\n")
    registry = NetworkConfigRegistry.load(filepath)
    assert list(registry.entries) == [5]
