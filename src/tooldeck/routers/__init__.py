"""FastAPI routers for API endpoints.

This package contains all route handlers organized by resource type.
"""

from tooldeck.routers import health, tools

__all__ = [
    "health",
    "tools",
]
