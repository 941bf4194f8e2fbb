"""Pydantic schema for the health endpoint."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness plus database reachability, for load balancers."""

    status: Literal["ok"] = "ok"
    environment: Literal["dev", "prod"] = Field(description="APP_ENV of this process")
    version: str = Field(description="Deployed API version")
    database: Literal["connected", "disconnected"]
