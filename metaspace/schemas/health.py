"""Pydantic schemas for health check responses."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness plus database reachability; load balancers only look at the status code."""

    status: Literal["ok"] = "ok"
    version: str = Field(description="API version string")
    environment: Literal["dev", "prod"]
    database: Literal["connected", "disconnected"]
