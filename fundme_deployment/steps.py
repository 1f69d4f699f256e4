from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Sequence, Tuple


class DeploymentStep(ABC):
    """A unit of deployment work, selectable by tag from a runner."""

    TAGS: Tuple[str, ...] = ()

    @abstractmethod
    def run(self) -> Any:
        raise NotImplementedError

    @classmethod
    def matches(cls, tags: Iterable[str]) -> bool:
        return any(tag in cls.TAGS for tag in tags)


def select_steps(steps: Sequence[DeploymentStep], tags: Iterable[str]) -> List[DeploymentStep]:
    """Returns the steps addressable by any of `tags`, in declaration order."""
    tags = list(tags)
    return [step for step in steps if step.matches(tags)]


def run_steps(steps: Sequence[DeploymentStep], tags: Iterable[str]) -> List[Any]:
    tags = list(tags)
    selected = select_steps(steps, tags)
    if not selected:
        raise ValueError(f"No deployment steps tagged with {', '.join(tags)}.")
    return [step.run() for step in selected]
