"""Pydantic models."""

from stackctl.models.service import ServiceRecord
from stackctl.models.stack import Stack

__all__ = ["ServiceRecord", "Stack"]
