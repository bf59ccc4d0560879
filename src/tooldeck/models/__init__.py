"""Pydantic models for API request and response schemas.

This package contains all Pydantic models used for validating and
serializing API requests and responses across all endpoints.
"""

from tooldeck.models.health import HealthResponse
from tooldeck.models.tools import (
    DiscoverySummaryResponse,
    TextContent,
    ToolCallRequest,
    ToolCallResponse,
    ToolListResponse,
    ToolSchema,
)

__all__ = [
    "DiscoverySummaryResponse",
    "HealthResponse",
    "TextContent",
    "ToolCallRequest",
    "ToolCallResponse",
    "ToolListResponse",
    "ToolSchema",
]
