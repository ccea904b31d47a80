"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
"""

from pydantic import BaseModel, Field


class PushRequest(BaseModel):
    """Request model for pushing the active script."""

    path: str | None = Field(
        default=None,
        description="Path of the active document; null when no document is open",
    )


class PushResponse(BaseModel):
    """Response model for a push invocation."""

    success: bool
    message: str
    status: str = Field(..., description="Timestamped line written to the status bar")


class StatusResponse(BaseModel):
    """Response model for the status bar."""

    text: str
    frozen: bool
