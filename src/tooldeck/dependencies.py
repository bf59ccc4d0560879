"""Dependency injection providers for FastAPI endpoints.

This module provides FastAPI dependency functions that are used across
multiple routers to inject common dependencies like settings and the
discovered tool set.
"""

from functools import lru_cache

from fastapi import HTTPException, Request

from tooldeck.config import TooldeckSettings
from tooldeck.tools import DiscoveryResult, ToolRegistry


@lru_cache
def get_settings() -> TooldeckSettings:
    """Get the application settings instance.

    This function is cached so that the same settings instance is reused
    across all requests. Settings are loaded from environment variables
    with the TOOLDECK_ prefix.

    Returns:
        TooldeckSettings: The application configuration settings.
    """
    return TooldeckSettings()


def get_discovery_result(request: Request) -> DiscoveryResult:
    """Get the merged discovery result from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        DiscoveryResult: The result of the startup discovery pass.

    Raises:
        HTTPException: If discovery has not run (503 Service Unavailable).
    """
    if not hasattr(request.app.state, "discovery"):
        raise HTTPException(
            status_code=503,
            detail="Tool discovery has not completed",
        )
    return request.app.state.discovery


def get_tool_registry(request: Request) -> ToolRegistry:
    """Get the tool registry from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        ToolRegistry: Registry holding the published tools.

    Raises:
        HTTPException: If discovery has not run (503 Service Unavailable).
    """
    if not hasattr(request.app.state, "tool_registry"):
        raise HTTPException(
            status_code=503,
            detail="Tool discovery has not completed",
        )
    return request.app.state.tool_registry
