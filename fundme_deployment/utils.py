import os
from pathlib import Path
from typing import Mapping, Optional

import yaml

from fundme_deployment.constants import ETHERSCAN_API_KEY_ENVVAR


def _load_yaml(filepath: Path) -> dict:
    """Loads a YAML file."""
    with open(filepath, "r") as file:
        return yaml.safe_load(file)


def has_verification_credential(environ: Optional[Mapping[str, str]] = None) -> bool:
    """
    Returns True if a block explorer API key is configured.
    Only the presence of the key matters, never its value.
    """
    environ = os.environ if environ is None else environ
    return bool(environ.get(ETHERSCAN_API_KEY_ENVVAR))


def is_resolved(args) -> bool:
    """Returns True if every constructor argument has a usable value."""
    for arg in args:
        if arg is None:
            return False
        if isinstance(arg, str) and not arg.strip():
            return False
    return True
