import pytest

from fundme_deployment.mechanism import (
    DeployedDependencyRecord,
    DeploymentMechanism,
    DeploymentRecord,
    Verifier,
)
from fundme_deployment.networks import NetworkConfigEntry, NetworkConfigRegistry, NetworkIdentity

# Common constants
MOCK_ADDRESS = "0xMOCK"
FEED_ADDRESS = "0xFEED"
DEPLOYER = "0xDEPLOYER"

HARDHAT = NetworkIdentity(name="hardhat", chain_id=31337)
SEPOLIA = NetworkIdentity(name="sepolia", chain_id=11155111, required_confirmations=6)
MAINNET = NetworkIdentity(name="mainnet", chain_id=1)


# Test doubles
class FakeDeployments(DeploymentMechanism):
    """In-memory deployment mechanism that records every call."""

    def __init__(self, error=None):
        self.error = error
        self.deployments = dict()
        self.calls = list()
        self.lookups = list()
        self.messages = list()

    def seed(self, name, address):
        self.deployments.setdefault(name, []).append(DeployedDependencyRecord(address=address))

    def deploy(self, name, sender, args, log=True, wait_confirmations=1):
        self.calls.append(
            {
                "name": name,
                "sender": sender,
                "args": tuple(args),
                "log": log,
                "wait_confirmations": wait_confirmations,
            }
        )
        if self.error is not None:
            raise self.error
        address = "0x" + f"{len(self.calls):040x}"
        self.seed(name, address)
        return DeploymentRecord(name=name, address=address, args=tuple(args))

    def get(self, name):
        self.lookups.append(name)
        records = self.deployments.get(name)
        if not records:
            return None
        return records[-1]

    def log(self, message):
        self.messages.append(message)


class FakeVerifier(Verifier):
    def __init__(self, error=None):
        self.error = error
        self.calls = list()

    def verify(self, address, args):
        self.calls.append((address, tuple(args)))
        if self.error is not None:
            raise self.error


class SpyRegistry(NetworkConfigRegistry):
    """Registry that remembers which chain ids were looked up."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.lookups = list()

    def config_for(self, chain_id):
        self.lookups.append(chain_id)
        return super().config_for(chain_id)


# Fixtures
@pytest.fixture
def registry():
    sepolia = NetworkConfigEntry(name="sepolia", eth_usd_price_feed=FEED_ADDRESS)
    return SpyRegistry(
        entries={SEPOLIA.chain_id: sepolia},
        development_chains=["hardhat", "localhost"],
    )


@pytest.fixture
def mechanism():
    return FakeDeployments()


@pytest.fixture
def verifier():
    return FakeVerifier()
