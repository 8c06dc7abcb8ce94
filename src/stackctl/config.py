"""Runtime configuration, resolved once at startup."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from stackctl.constants import DEFAULT_DOCKER_TIMEOUT, DEFAULT_LOG_LEVEL
from stackctl.errors import ConfigError

# Environment variable behind each field, for error messages
ENV_VARS = {
    "docker_host": "DOCKER_HOST",
    "docker_timeout": "STACKCTL_DOCKER_TIMEOUT",
    "log_level": "STACKCTL_LOG_LEVEL",
}


class StackctlConfig(BaseModel):
    """Docker connection and logging settings."""

    docker_host: Optional[str] = Field(default_factory=lambda: os.environ.get("DOCKER_HOST") or None)
    docker_timeout: int = Field(
        default_factory=lambda: os.environ.get("STACKCTL_DOCKER_TIMEOUT") or DEFAULT_DOCKER_TIMEOUT,
        gt=0,
        validate_default=True,
    )
    log_level: str = Field(
        default_factory=lambda: os.environ.get("STACKCTL_LOG_LEVEL") or DEFAULT_LOG_LEVEL,
        validate_default=True,
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"unknown log level {value!r}")
        return value


@lru_cache(maxsize=1)
def get_config() -> StackctlConfig:
    """Return the global StackctlConfig (resolved once, cached)."""
    try:
        return StackctlConfig()
    except ValidationError as exc:
        problems = "; ".join(
            f"{ENV_VARS.get(str(err['loc'][0]), err['loc'][0])}: {err['msg']}" for err in exc.errors()
        )
        raise ConfigError(f"invalid configuration: {problems}") from exc
