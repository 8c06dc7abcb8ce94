"""Docker Engine API wrappers built on the Docker SDK."""

from __future__ import annotations

import logging

import docker
from docker.errors import DockerException
from pydantic import ValidationError

from stackctl.config import StackctlConfig
from stackctl.constants import LABEL_NAMESPACE
from stackctl.errors import DockerError
from stackctl.models import ServiceRecord

log = logging.getLogger(__name__)


def get_client(cfg: StackctlConfig) -> docker.DockerClient:
    """Connect to the configured daemon, or the one the environment points at."""
    try:
        if cfg.docker_host:
            return docker.DockerClient(base_url=cfg.docker_host, timeout=cfg.docker_timeout)
        return docker.from_env(timeout=cfg.docker_timeout)
    except DockerException as exc:
        raise DockerError(str(exc)) from exc


def list_stack_services(client: docker.DockerClient) -> list[ServiceRecord]:
    """Return every service carrying the stack namespace label."""
    try:
        services = client.services.list(filters={"label": LABEL_NAMESPACE})
    except DockerException as exc:
        raise DockerError(str(exc)) from exc
    log.debug("Fetched %d stack services", len(services))
    try:
        return [ServiceRecord.from_attrs(s.attrs) for s in services]
    except ValidationError as exc:
        raise DockerError(f"malformed service record from the Docker API: {exc}") from exc
