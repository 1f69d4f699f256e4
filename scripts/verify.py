import click
from ape.cli import ConnectedProviderCommand, network_option

from fundme_deployment.ape_backend import (
    ApeDeployments,
    ApeExplorerVerifier,
    active_network_identity,
    check_etherscan_plugin,
)
from fundme_deployment.constants import FUND_ME
from fundme_deployment.mechanism import DeploymentRecord
from fundme_deployment.networks import NetworkConfigRegistry
from fundme_deployment.options import address_option, params_option
from fundme_deployment.utils import has_verification_credential
from fundme_deployment.verification import VerificationGate, VerificationOutcome


@click.command(cls=ConnectedProviderCommand)
@network_option(required=True)
@address_option
@params_option
def cli(network, address, params_filepath):
    """Verify an already deployed FundMe contract."""
    registry = NetworkConfigRegistry.load(params_filepath)
    identity = active_network_identity()
    if registry.is_development_chain(identity.name):
        raise click.BadParameter(
            f"'{identity.name}' is a development chain; there is no explorer to verify on.",
            param_hint="--network",
        )
    if not has_verification_credential():
        raise click.UsageError("ETHERSCAN_API_KEY is not set.")
    check_etherscan_plugin(network=identity, registry=registry)

    mechanism = ApeDeployments()
    # the explorer reads constructor arguments from the creation transaction
    record = DeploymentRecord(name=FUND_ME, address=address, args=())

    gate = VerificationGate(registry=registry, verifier=ApeExplorerVerifier(), mechanism=mechanism)
    outcome = gate.run(identity, record, has_verification_credential=True)
    if outcome is VerificationOutcome.VERIFIED:
        print(f"(i) {FUND_ME} at {address} verified.")


if __name__ == "__main__":
    cli()
