"""Swarm service as returned by the Engine API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceRecord(BaseModel):
    """The parts of a Swarm service that stack listing reads."""

    id: str = Field(min_length=1)
    labels: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_attrs(cls, attrs: dict[str, Any]) -> ServiceRecord:
        """Build from the raw ``/services`` JSON (``ID`` and ``Spec.Labels``)."""
        spec = attrs.get("Spec") or {}
        return cls(id=attrs.get("ID"), labels=spec.get("Labels") or {})
