from fundme_deployment.constants import MOCK_V3_AGGREGATOR
from fundme_deployment.mechanism import DeploymentMechanism
from fundme_deployment.networks import NetworkConfigRegistry, NetworkIdentity


class DependencyNotDeployed(ValueError):
    """Raised when a development chain has no mock dependency deployment"""


class DependencyAddressResolver:
    """
    Resolves the price feed address injected into the FundMe constructor.

    Development chains have no real oracle, so the most recent mock
    deployment is used. Every other chain reads the static registry.
    """

    def __init__(
        self,
        registry: NetworkConfigRegistry,
        mechanism: DeploymentMechanism,
        mock_name: str = MOCK_V3_AGGREGATOR,
    ):
        self.registry = registry
        self.mechanism = mechanism
        self.mock_name = mock_name

    def resolve(self, network: NetworkIdentity) -> str:
        if self.registry.is_development_chain(network.name):
            return self._resolve_mock(network)
        entry = self.registry.config_for(network.chain_id)
        return entry.eth_usd_price_feed

    def _resolve_mock(self, network: NetworkIdentity) -> str:
        record = self.mechanism.get(self.mock_name)
        if record is None:
            raise DependencyNotDeployed(
                f"{self.mock_name} is not deployed on '{network.name}'; "
                f"deploy mocks before deploying dependents."
            )
        return record.address
