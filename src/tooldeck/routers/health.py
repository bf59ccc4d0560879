"""Health check endpoint router."""

from fastapi import APIRouter, Request

from tooldeck.models.health import HealthResponse

router = APIRouter(prefix="/api/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Health check endpoint.

    Returns the current health status and version of tooldeck, along with
    the number of published tools once discovery has run.

    Args:
        request: The FastAPI request object.

    Returns:
        HealthResponse: Health status and version information.
    """
    tool_count = None
    if hasattr(request.app.state, "tool_registry"):
        tool_count = len(request.app.state.tool_registry)

    return HealthResponse(status="ok", version="0.1.0", tool_count=tool_count)
