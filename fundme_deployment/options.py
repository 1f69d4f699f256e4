from pathlib import Path

import click

from fundme_deployment.constants import (
    ALL_TAG,
    DEFAULT_PARAMS_FILEPATH,
    FUND_ME_TAG,
    MOCKS_TAG,
)
from fundme_deployment.types import ChecksumAddress, MinInt, Policy
from fundme_deployment.verification import VerificationPolicy

tags_option = click.option(
    "--tags",
    "-t",
    help="Deployment steps to run, by tag.",
    type=click.Choice([ALL_TAG, FUND_ME_TAG, MOCKS_TAG]),
    multiple=True,
    default=[ALL_TAG],
    show_default=True,
)

params_option = click.option(
    "--params",
    "-p",
    "params_filepath",
    help=(
        "Network params YAML (price feeds and development chains), "
        f"in the format of {DEFAULT_PARAMS_FILEPATH.name}; built-in defaults when omitted."
    ),
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    required=False,
)

verification_policy_option = click.option(
    "--verification-policy",
    "-v",
    "policy",
    help="'strict' aborts on a verification failure, 'best-effort' reports it and continues.",
    type=Policy(),
    default=VerificationPolicy.STRICT.value,
    show_default=True,
)

confirmations_option = click.option(
    "--confirmations",
    "-c",
    help="Block confirmations to wait for; defaults to the network's requirement.",
    type=MinInt(1),
    required=False,
)

account_option = click.option(
    "--account",
    "-a",
    "account_alias",
    help="Alias of the ape account to deploy from; a test account is used on local chains.",
    type=click.STRING,
    required=False,
)

autosign_option = click.option(
    "--autosign",
    help="Sign transactions and skip confirmation prompts.",
    is_flag=True,
    default=False,
)

address_option = click.option(
    "--address",
    help="Address of the deployed contract.",
    type=ChecksumAddress(),
    required=True,
)
