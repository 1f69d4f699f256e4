from typing import Any, Optional, Sequence

from fundme_deployment.confirm import _confirm_resolution
from fundme_deployment.constants import DEFAULT_CONFIRMATIONS
from fundme_deployment.mechanism import DeploymentMechanism, DeploymentRecord
from fundme_deployment.utils import is_resolved


class DeploymentFailure(Exception):
    """Raised when the deployment mechanism cannot complete a deployment"""


class DeploymentInvoker:
    """Issues deployment requests with validated, annotated arguments."""

    def __init__(self, mechanism: DeploymentMechanism, autosign: bool = False):
        self.mechanism = mechanism
        self._autosign = autosign

    def deploy(
        self,
        contract_name: str,
        args: Sequence[Any],
        deployer_account: Any,
        confirmations: Optional[int] = None,
    ) -> DeploymentRecord:
        args = tuple(args)
        if not is_resolved(args):
            raise ValueError(f"Unresolved constructor arguments for {contract_name}: {args}")

        if not self._autosign:
            _confirm_resolution(args, contract_name)

        wait_confirmations = confirmations or DEFAULT_CONFIRMATIONS
        try:
            record = self.mechanism.deploy(
                contract_name,
                sender=deployer_account,
                args=args,
                log=True,
                wait_confirmations=wait_confirmations,
            )
        except Exception as e:
            raise DeploymentFailure(f"Deployment of {contract_name} failed: {e}") from e

        return record
