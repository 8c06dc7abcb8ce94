"""stackctl — list Docker Swarm stacks and their services."""

from stackctl.config import StackctlConfig
from stackctl.constants import DEFAULT_DOCKER_TIMEOUT, LABEL_NAMESPACE
from stackctl.models import ServiceRecord, Stack

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_DOCKER_TIMEOUT",
    "LABEL_NAMESPACE",
    "ServiceRecord",
    "Stack",
    "StackctlConfig",
]
