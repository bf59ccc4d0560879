"""Pydantic models for tool API requests and responses."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ToolSchema(BaseModel):
    """A published tool as seen by clients."""

    name: str = Field(..., description="Unique tool name")
    description: str = Field(default="", description="What the tool does")
    input_schema: dict[str, Any] = Field(
        ..., description="JSON schema for the tool arguments"
    )

    model_config = ConfigDict(from_attributes=True)


class ToolListResponse(BaseModel):
    """Response model for listing all published tools."""

    tools: list[ToolSchema] = Field(
        default_factory=list,
        description="Tools in merged order (global first, then local)",
    )


class DiscoverySummaryResponse(BaseModel):
    """Response model for the discovery summary."""

    total: int = Field(..., description="Number of published tools")
    global_count: int = Field(..., description="Tools coming from the global source")
    local_count: int = Field(..., description="Tools coming from the local source")
    conflicts: list[str] = Field(
        default_factory=list,
        description="Names where a local tool replaced a global tool",
    )
    global_path: str | None = Field(
        default=None, description="Resolved global tools directory"
    )
    global_path_source: str | None = Field(
        default=None,
        description="Where the global path came from: explicit-override, environment or default",
    )
    warnings: list[str] = Field(
        default_factory=list,
        description="Advisories raised while scanning",
    )


class ToolCallRequest(BaseModel):
    """Request model for calling a tool."""

    arguments: dict[str, Any] = Field(
        default_factory=dict, description="Arguments passed to the tool"
    )


class TextContent(BaseModel):
    """A text block in a tool call result."""

    type: Literal["text"] = "text"
    text: str


class ToolCallResponse(BaseModel):
    """Response model for a tool call."""

    name: str = Field(..., description="Name of the tool that was called")
    content: list[TextContent] = Field(..., description="Tool output")
