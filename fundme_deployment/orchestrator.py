from enum import Enum
from typing import Any, Optional

from fundme_deployment.constants import COMPLETION_MARKER, FUND_ME, FUND_ME_TAGS
from fundme_deployment.deployer import DeploymentInvoker
from fundme_deployment.mechanism import DeploymentMechanism, DeploymentRecord, Verifier
from fundme_deployment.networks import NetworkConfigRegistry, NetworkIdentity
from fundme_deployment.resolver import DependencyAddressResolver
from fundme_deployment.steps import DeploymentStep
from fundme_deployment.verification import (
    VerificationGate,
    VerificationOutcome,
    VerificationPolicy,
)


class DeploymentState(Enum):
    PENDING = "pending"
    CONFIG_RESOLVING = "config-resolving"
    DEPLOYING = "deploying"
    VERIFICATION_DECIDING = "verification-deciding"
    VERIFYING = "verifying"
    SKIPPED = "skipped"
    DONE = "done"
    FAILED = "failed"


class FundMeDeployment(DeploymentStep):
    """
    Deploys FundMe with the price feed of the target network and
    optionally publishes its source to the block explorer.

    Every collaborator is injected; nothing is read from process-wide state.
    """

    TAGS = FUND_ME_TAGS

    def __init__(
        self,
        network: NetworkIdentity,
        registry: NetworkConfigRegistry,
        mechanism: DeploymentMechanism,
        verifier: Verifier,
        deployer_account: Any,
        has_verification_credential: bool,
        policy: VerificationPolicy = VerificationPolicy.STRICT,
        autosign: bool = False,
    ):
        self.network = network
        self.mechanism = mechanism
        self.deployer_account = deployer_account
        self.has_verification_credential = has_verification_credential

        self.resolver = DependencyAddressResolver(registry=registry, mechanism=mechanism)
        self.invoker = DeploymentInvoker(mechanism=mechanism, autosign=autosign)
        self.gate = VerificationGate(
            registry=registry, verifier=verifier, mechanism=mechanism, policy=policy
        )

        self.state = DeploymentState.PENDING
        self.record: Optional[DeploymentRecord] = None
        self.verification: Optional[VerificationOutcome] = None

    def run(self) -> DeploymentRecord:
        try:
            self.state = DeploymentState.CONFIG_RESOLVING
            price_feed_address = self.resolver.resolve(self.network)
            args = [price_feed_address]

            self.state = DeploymentState.DEPLOYING
            self.record = self.invoker.deploy(
                FUND_ME,
                args=args,
                deployer_account=self.deployer_account,
                confirmations=self.network.required_confirmations,
            )

            self.state = DeploymentState.VERIFICATION_DECIDING
            if self.gate.should_verify(self.network, self.has_verification_credential):
                self.state = DeploymentState.VERIFYING
            else:
                self.state = DeploymentState.SKIPPED
            self.verification = self.gate.run(
                self.network, self.record, self.has_verification_credential
            )
        except BaseException:
            self.state = DeploymentState.FAILED
            raise

        self.state = DeploymentState.DONE
        self.mechanism.log(COMPLETION_MARKER)
        return self.record
