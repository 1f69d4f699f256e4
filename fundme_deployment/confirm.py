from typing import Any, Sequence

from ape.utils import ZERO_ADDRESS


def _confirm_deployment(contract_name: str) -> None:
    """Asks the user to confirm the deployment of a single contract."""
    answer = input(f"Deploy {contract_name} Y/N? ")
    if answer.lower().strip() == "n":
        print("Aborting deployment!")
        exit(-1)


def _continue() -> None:
    """Asks the user to continue."""
    answer = input("Continue Y/N? ")
    if answer.lower().strip() == "n":
        print("Aborting deployment!")
        exit(-1)


def _confirm_zero_address() -> None:
    answer = input("Zero Address detected for deployment parameter; Continue? Y/N? ")
    if answer.lower().strip() == "n":
        print("Aborting deployment!")
        exit(-1)


def _confirm_resolution(resolved_args: Sequence[Any], contract_name: str) -> None:
    """Asks the user to confirm the resolved constructor arguments for a single contract."""
    if len(resolved_args) == 0:
        print(f"\n(i) No constructor parameters for {contract_name}")
        _confirm_deployment(contract_name)
        return

    print(f"\nConstructor parameters for {contract_name}")
    for position, resolved_value in enumerate(resolved_args):
        print(f"\t[{position}]={resolved_value}")
    _confirm_deployment(contract_name)
    if ZERO_ADDRESS in resolved_args:
        _confirm_zero_address()
