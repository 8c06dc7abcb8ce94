"""Shared test fixtures."""

from __future__ import annotations

from typing import Any, Callable
from unittest.mock import MagicMock

import pytest

from stackctl import LABEL_NAMESPACE, StackctlConfig


def _make_service(service_id: str, stack: str | None = None, **labels: str) -> MagicMock:
    """Return a stand-in for ``docker.models.services.Service``."""
    if stack is not None:
        labels[LABEL_NAMESPACE] = stack
    service = MagicMock()
    service.id = service_id
    service.attrs = {"ID": service_id, "Spec": {"Name": service_id, "Labels": labels}}
    return service


@pytest.fixture
def make_service() -> Callable[..., MagicMock]:
    return _make_service


@pytest.fixture
def stack_config() -> StackctlConfig:
    return StackctlConfig(docker_host="tcp://127.0.0.1:2375", docker_timeout=5, log_level="WARNING")


@pytest.fixture
def docker_client() -> Callable[..., MagicMock]:
    """Factory for a fake DockerClient whose ``services.list`` returns ``services``."""

    def _make(*services: Any) -> MagicMock:
        client = MagicMock()
        client.services.list.return_value = list(services)
        return client

    return _make
