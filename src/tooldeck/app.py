"""FastAPI application factory and lifespan management.

This module contains the create_app() factory function that creates and configures
the FastAPI application instance, including lifespan management for startup
discovery and router registration.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tooldeck.config import TooldeckSettings
from tooldeck.routers import health, tools
from tooldeck.tools import ToolDiscoveryService, ToolRegistry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan context manager for FastAPI application.

    Runs one discovery pass at startup and stores the merged result and the
    tool registry in app.state. An unsafe or malformed global tools path
    aborts startup.

    Args:
        app: The FastAPI application instance.

    Yields:
        None: Control is yielded while the app is running.
    """
    settings: TooldeckSettings = app.state.settings
    service = ToolDiscoveryService(
        settings.resolved_tools_dir,
        global_override=app.state.global_tools_override,
        environment_value=settings.global_tools_path,
        validate_global_path=settings.validate_global_path,
    )

    result = await service.discover()
    app.state.discovery = result
    app.state.global_path = service.last_resolved
    app.state.tool_registry = ToolRegistry(result.tools())

    if service.last_resolved is not None:
        logger.info(
            f"Global tools from: {service.last_resolved.path} "
            f"({service.last_resolved.resolution_source})"
        )
    if result.summary.total == 0:
        logger.warning("No valid tools found in local or global directories")

    yield

    logger.info(f"Shutting down {settings.server_name}")


def create_app(
    settings: TooldeckSettings | None = None,
    global_tools_override: str | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Optional TooldeckSettings instance. If not provided,
                  settings will be loaded from environment variables.
        global_tools_override: Explicit global tools path; takes precedence
                  over TOOLDECK_GLOBAL_TOOLS_PATH.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    if settings is None:
        from tooldeck.dependencies import get_settings

        settings = get_settings()

    app = FastAPI(
        title="tooldeck",
        description="Serve Python tools discovered from global and local folders",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Store configuration in app.state for lifespan access
    app.state.settings = settings
    app.state.global_tools_override = global_tools_override

    # Note: FastAPI's type hints for add_middleware are overly strict
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(tools.router)

    return app
