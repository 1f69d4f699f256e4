from enum import Enum

from fundme_deployment.mechanism import DeploymentMechanism, DeploymentRecord, Verifier
from fundme_deployment.networks import NetworkConfigRegistry, NetworkIdentity


class VerificationFailure(Exception):
    """Raised when the block explorer rejects or cannot complete verification"""


class VerificationPolicy(Enum):
    # failures abort the run
    STRICT = "strict"
    # failures are reported and the run completes
    BEST_EFFORT = "best-effort"


class VerificationOutcome(Enum):
    VERIFIED = "verified"
    SKIPPED = "skipped"
    FAILED = "failed"


class VerificationGate:
    def __init__(
        self,
        registry: NetworkConfigRegistry,
        verifier: Verifier,
        mechanism: DeploymentMechanism,
        policy: VerificationPolicy = VerificationPolicy.STRICT,
    ):
        self.registry = registry
        self.verifier = verifier
        self.mechanism = mechanism
        self.policy = policy

    def should_verify(self, network: NetworkIdentity, has_verification_credential: bool) -> bool:
        is_development = self.registry.is_development_chain(network.name)
        return not is_development and bool(has_verification_credential)

    def run(
        self,
        network: NetworkIdentity,
        record: DeploymentRecord,
        has_verification_credential: bool,
    ) -> VerificationOutcome:
        if not self.should_verify(network, has_verification_credential):
            return VerificationOutcome.SKIPPED

        self.mechanism.log(f"(i) Verifying {record.name} at {record.address}...")
        try:
            self.verifier.verify(record.address, record.args)
        except Exception as e:
            if self.policy is VerificationPolicy.STRICT:
                if isinstance(e, VerificationFailure):
                    raise
                raise VerificationFailure(f"Verification of {record.name} failed: {e}") from e
            self.mechanism.log(f"(!) Verification of {record.name} failed: {e}")
            return VerificationOutcome.FAILED

        return VerificationOutcome.VERIFIED
