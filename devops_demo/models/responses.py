"""
Pydantic models for the service's JSON responses.

Field names follow the public JSON contract; ``bootTime`` is exposed
through an alias so Python code keeps snake_case attributes.
"""

from typing import Literal

from pydantic import BaseModel, Field


class InfoResponse(BaseModel):
    """Payload returned by the root endpoint."""

    message: str = "DevOps demo application is running"
    docs: str = "Check README.md for usage instructions."


class HealthResponse(BaseModel):
    """Liveness payload returned by ``/health``."""

    status: Literal["ok"] = "ok"
    uptime: float = Field(
        ...,
        ge=0.0,
        description="Seconds the process has been running (monotonic clock).",
    )
    timestamp: str = Field(
        ...,
        description="Current time, ISO-8601 UTC.",
    )
    boot_time: str = Field(
        ...,
        alias="bootTime",
        description="Time the application instance was built, ISO-8601 UTC.",
    )
    version: str

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    """Body returned for unhandled server errors."""

    error: str
    detail: str
