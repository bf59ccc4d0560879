"""Health check response model."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for the health check endpoint.

    Attributes:
        status: Health status indicator ("ok" or "error").
        version: The version of tooldeck.
        tool_count: Number of tools published, if discovery has run.
    """

    status: str = Field(..., description="Health status of the service")
    version: str = Field(..., description="Version of tooldeck")
    tool_count: int | None = Field(
        default=None,
        description="Number of published tools",
    )
