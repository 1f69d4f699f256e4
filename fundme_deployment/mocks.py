from typing import Any, Optional

from fundme_deployment.constants import (
    MOCK_DECIMALS,
    MOCK_INITIAL_ANSWER,
    MOCK_V3_AGGREGATOR,
    MOCKS_TAGS,
)
from fundme_deployment.deployer import DeploymentInvoker
from fundme_deployment.mechanism import DeploymentMechanism, DeploymentRecord
from fundme_deployment.networks import NetworkConfigRegistry, NetworkIdentity
from fundme_deployment.steps import DeploymentStep


class MockDeployment(DeploymentStep):
    """Deploys a MockV3Aggregator price feed on development chains only."""

    TAGS = MOCKS_TAGS

    def __init__(
        self,
        network: NetworkIdentity,
        registry: NetworkConfigRegistry,
        mechanism: DeploymentMechanism,
        deployer_account: Any,
        autosign: bool = False,
        decimals: int = MOCK_DECIMALS,
        initial_answer: int = MOCK_INITIAL_ANSWER,
    ):
        self.network = network
        self.registry = registry
        self.mechanism = mechanism
        self.deployer_account = deployer_account
        self.invoker = DeploymentInvoker(mechanism=mechanism, autosign=autosign)
        self.decimals = decimals
        self.initial_answer = initial_answer

    def run(self) -> Optional[DeploymentRecord]:
        if not self.registry.is_development_chain(self.network.name):
            return None

        self.mechanism.log("Local network detected! Deploying mocks...")
        record = self.invoker.deploy(
            MOCK_V3_AGGREGATOR,
            args=[self.decimals, self.initial_answer],
            deployer_account=self.deployer_account,
            confirmations=self.network.required_confirmations,
        )
        self.mechanism.log("Mocks deployed!")
        return record
