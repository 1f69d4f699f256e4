from abc import ABC, abstractmethod
from typing import Any, NamedTuple, Optional, Sequence, Tuple

DeploymentArgs = Tuple[Any, ...]


class DeployedDependencyRecord(NamedTuple):
    """A previously deployed contract, looked up by name."""

    address: str


class DeploymentRecord(NamedTuple):
    """The outcome of a single contract deployment."""

    name: str
    address: str
    args: DeploymentArgs


class DeploymentMechanism(ABC):
    """
    Deploys contracts and remembers what it has deployed.
    Implementations own persistence of deployment results.
    """

    @abstractmethod
    def deploy(
        self,
        name: str,
        sender: Any,
        args: Sequence[Any],
        log: bool = True,
        wait_confirmations: int = 1,
    ) -> DeploymentRecord:
        raise NotImplementedError

    @abstractmethod
    def get(self, name: str) -> Optional[DeployedDependencyRecord]:
        """Returns the most recent deployment of `name`, or None."""
        raise NotImplementedError

    def log(self, message: str) -> None:
        print(message)


class Verifier(ABC):
    """Publishes contract source to a block explorer."""

    @abstractmethod
    def verify(self, address: str, args: Sequence[Any]) -> None:
        raise NotImplementedError
