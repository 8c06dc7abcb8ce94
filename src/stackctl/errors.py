"""Custom exceptions for stackctl."""

from __future__ import annotations


class StackctlError(Exception):
    """Base exception for all stackctl operations."""

    def __init__(self, message: str, *, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


class DockerError(StackctlError):
    """Docker Engine API call failed."""


class MissingLabelError(StackctlError):
    """A service matched the stack filter but carries no namespace label."""

    def __init__(self, service_id: str, label: str):
        super().__init__(f"cannot get label {label} for service {service_id}")
        self.service_id = service_id
        self.label = label


class ConfigError(StackctlError):
    """Configuration from the environment is invalid."""
