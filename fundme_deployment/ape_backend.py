from typing import Any, Optional, Sequence

from ape import accounts, networks, project
from ape.api import AccountAPI
from ape.cli.choices import select_account
from ape.contracts import ContractContainer
from ape_accounts import KeyfileAccount

from fundme_deployment.mechanism import (
    DeployedDependencyRecord,
    DeploymentMechanism,
    DeploymentRecord,
    Verifier,
)
from fundme_deployment.networks import NetworkConfigRegistry, NetworkIdentity
from fundme_deployment.verification import VerificationFailure


def get_contract_container(contract: str) -> ContractContainer:
    try:
        return getattr(project, contract)
    except AttributeError:
        raise ValueError(f"No contract found with name '{contract}'.")


def active_network_identity() -> NetworkIdentity:
    """Reads the identity of the network ape is connected to."""
    network = networks.provider.network
    return NetworkIdentity(
        name=network.name,
        chain_id=networks.provider.chain_id,
        required_confirmations=network.required_confirmations,
    )


def get_deployer_account(
    network: NetworkIdentity,
    registry: NetworkConfigRegistry,
    alias: Optional[str] = None,
    autosign: bool = False,
) -> AccountAPI:
    """Returns the named deployer account for the active network."""
    if registry.is_development_chain(network.name):
        return accounts.test_accounts[0]

    account = accounts.load(alias) if alias else select_account()
    if isinstance(account, KeyfileAccount):
        if autosign:
            print("WARNING: Autosign is enabled. Transactions will be signed automatically.")
        account.set_autosign(autosign)
    return account


def check_etherscan_plugin(network: NetworkIdentity, registry: NetworkConfigRegistry) -> None:
    """Checks that the ape-etherscan plugin is installed when verification may run."""
    if registry.is_development_chain(network.name):
        # unnecessary for local deployment
        return
    try:
        import ape_etherscan  # noqa: F401
    except ImportError:
        raise ImportError("Please install the ape-etherscan plugin to verify contracts.")


class ApeDeployments(DeploymentMechanism):
    """Deploys project contracts with ape and reads back ape's deployment cache."""

    def deploy(
        self,
        name: str,
        sender: AccountAPI,
        args: Sequence[Any],
        log: bool = True,
        wait_confirmations: int = 1,
    ) -> DeploymentRecord:
        container = get_contract_container(name)
        instance = sender.deploy(container, *args, required_confirmations=wait_confirmations)
        if log:
            self.log(f"'{name}' deployed to: {instance.address}")
        return DeploymentRecord(name=name, address=instance.address, args=tuple(args))

    def get(self, name: str) -> Optional[DeployedDependencyRecord]:
        container = get_contract_container(name)
        deployments = container.deployments
        if not deployments:
            return None
        return DeployedDependencyRecord(address=deployments[-1].address)


class ApeExplorerVerifier(Verifier):
    """Publishes contract source through the explorer plugin of the active network."""

    def verify(self, address: str, args: Sequence[Any]) -> None:
        # constructor arguments are recovered by the explorer from the creation transaction
        explorer = networks.provider.network.explorer
        if explorer is None:
            raise VerificationFailure(
                f"No block explorer configured for network '{networks.provider.network.name}'."
            )
        explorer.publish_contract(address)
