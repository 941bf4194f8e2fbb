"""Small response shapes shared across routers."""

from typing import Any

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain acknowledgement, e.g. after a delete."""

    message: str


class ErrorResponse(BaseModel):
    """Body returned for every application error."""

    error: str = Field(..., description="Error code (exception class name)")
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
