"""Shared Pydantic schema base."""

from __future__ import annotations

from pydantic import BaseModel


class ApiModel(BaseModel):
    """All API schemas inherit from this. Field names go over the wire as-is (snake_case)."""

    model_config = {
        "from_attributes": True,
    }


class HealthResponse(BaseModel):
    """Health-check response returned by /health."""
    status: str = "ok"
    app: str
    env: str
