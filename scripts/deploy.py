#!/usr/bin/python3
import click
from ape.cli import ConnectedProviderCommand, network_option

from fundme_deployment.ape_backend import (
    ApeDeployments,
    ApeExplorerVerifier,
    active_network_identity,
    check_etherscan_plugin,
    get_deployer_account,
)
from fundme_deployment.confirm import _continue
from fundme_deployment.mocks import MockDeployment
from fundme_deployment.networks import NetworkConfigRegistry
from fundme_deployment.options import (
    account_option,
    autosign_option,
    confirmations_option,
    params_option,
    tags_option,
    verification_policy_option,
)
from fundme_deployment.orchestrator import FundMeDeployment
from fundme_deployment.steps import run_steps
from fundme_deployment.utils import has_verification_credential


@click.command(cls=ConnectedProviderCommand)
@network_option(required=True)
@tags_option
@params_option
@verification_policy_option
@confirmations_option
@account_option
@autosign_option
def cli(network, tags, params_filepath, policy, confirmations, account_alias, autosign):
    """
    Deploy FundMe, and its price feed mock on development chains.

    ape run deploy --network ethereum:local:test --tags all --autosign
    ape run deploy --network ethereum:sepolia:infura --tags fundme
    """
    registry = NetworkConfigRegistry.load(params_filepath)
    identity = active_network_identity()
    if confirmations:
        identity = identity._replace(required_confirmations=confirmations)

    verify = has_verification_credential()
    if verify:
        check_etherscan_plugin(network=identity, registry=registry)

    deployer_account = get_deployer_account(
        network=identity, registry=registry, alias=account_alias, autosign=autosign
    )
    mechanism = ApeDeployments()

    print(
        f"Account: {deployer_account.address}",
        f"Params: {params_filepath or 'built-in defaults'}",
        f"Network: {identity.name}",
        f"Chain ID: {identity.chain_id}",
        f"Development chain: {registry.is_development_chain(identity.name)}",
        f"Verify: {verify} ({policy.value})",
        f"Tags: {', '.join(tags)}",
        sep="\n",
    )
    if not autosign:
        _continue()

    steps = [
        MockDeployment(
            network=identity,
            registry=registry,
            mechanism=mechanism,
            deployer_account=deployer_account,
            autosign=autosign,
        ),
        FundMeDeployment(
            network=identity,
            registry=registry,
            mechanism=mechanism,
            verifier=ApeExplorerVerifier(),
            deployer_account=deployer_account,
            has_verification_credential=verify,
            policy=policy,
            autosign=autosign,
        ),
    ]
    run_steps(steps, tags=tags)


if __name__ == "__main__":
    cli()
