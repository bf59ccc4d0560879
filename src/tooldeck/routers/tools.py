"""Tools router for listing and calling discovered tools.

This module provides REST API endpoints for:
- Listing all published tools
- Getting the discovery summary (counts, conflicts, global path)
- Calling a tool by name
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status

from tooldeck.dependencies import get_discovery_result, get_tool_registry
from tooldeck.errors import ToolExecutionError, ToolNotFoundError
from tooldeck.models.tools import (
    DiscoverySummaryResponse,
    TextContent,
    ToolCallRequest,
    ToolCallResponse,
    ToolListResponse,
    ToolSchema,
)
from tooldeck.tools import DiscoveryResult, ToolRegistry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/tools", tags=["tools"])


@router.get(
    "",
    response_model=ToolListResponse,
    summary="List all tools",
)
async def list_tools(
    registry: Annotated[ToolRegistry, Depends(get_tool_registry)],
) -> ToolListResponse:
    """List the merged tool set.

    Only name, description and input schema are exposed; where a tool was
    found is not part of the published shape.

    Args:
        registry: Injected ToolRegistry

    Returns:
        All published tools
    """
    tools = [
        ToolSchema(
            name=tool.name,
            description=tool.description or "",
            input_schema=dict(tool.input_schema),
        )
        for tool in registry.list_tools()
    ]
    return ToolListResponse(tools=tools)


@router.get(
    "/summary",
    response_model=DiscoverySummaryResponse,
    summary="Get the discovery summary",
)
async def get_discovery_summary(
    request: Request,
    result: Annotated[DiscoveryResult, Depends(get_discovery_result)],
) -> DiscoverySummaryResponse:
    """Get counts, conflicts and the resolved global path of the last discovery.

    Args:
        request: The FastAPI request object
        result: Injected DiscoveryResult

    Returns:
        Discovery summary
    """
    resolved = getattr(request.app.state, "global_path", None)
    return DiscoverySummaryResponse(
        total=result.summary.total,
        global_count=result.summary.global_count,
        local_count=result.summary.local_count,
        conflicts=list(result.summary.conflict_names),
        global_path=str(resolved.path) if resolved else None,
        global_path_source=resolved.resolution_source if resolved else None,
        warnings=list(result.warnings),
    )


@router.post(
    "/{name}/call",
    response_model=ToolCallResponse,
    summary="Call a tool",
)
async def call_tool(
    name: str,
    body: ToolCallRequest,
    registry: Annotated[ToolRegistry, Depends(get_tool_registry)],
) -> ToolCallResponse:
    """Run a tool with the given arguments.

    Args:
        name: Exact tool name
        body: Tool arguments
        registry: Injected ToolRegistry

    Returns:
        The tool's text output

    Raises:
        HTTPException: 404 if no tool has this name
        HTTPException: 500 if the tool raised
    """
    try:
        text = await registry.call(name, body.arguments)
    except ToolNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ToolExecutionError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )

    return ToolCallResponse(name=name, content=[TextContent(text=text)])
