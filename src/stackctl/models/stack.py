"""Stack summary model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Stack(BaseModel):
    """A deployed stack and how many services it runs."""

    name: str
    services: int = Field(default=0, ge=0)
