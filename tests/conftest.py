"""Pytest configuration and shared fixtures for tooldeck tests.

This module provides common fixtures used across all test modules,
including tool file creation, test app creation and async client setup.
"""

import textwrap
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from tooldeck import create_app
from tooldeck.config import TooldeckSettings


def tool_source(name: str, description: str = "", output: str | None = None) -> str:
    """Return the source of a minimal sync tool file."""
    output = output if output is not None else name
    return textwrap.dedent(
        f"""
        def _run(args):
            return {output!r} + ":" + str(args.get("value", ""))


        tool = {{
            "name": {name!r},
            "description": {description!r},
            "input_schema": {{
                "type": "object",
                "properties": {{"value": {{"type": "string"}}}},
            }},
            "run": _run,
        }}
        """
    )


@pytest.fixture
def write_tool():
    """Factory fixture writing a tool file into a directory.

    Returns:
        Callable taking (directory, name, filename=None, description="", output=None)
        and returning the written path.
    """

    def _write(
        directory: Path,
        name: str,
        filename: str | None = None,
        description: str = "",
        output: str | None = None,
    ) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / (filename or f"{name.lower()}.py")
        path.write_text(tool_source(name, description, output), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def test_settings(tmp_path):
    """Create test settings with isolated temporary directories.

    The temporary directory lives under the system temp folder, which the
    global path safety check rejects, so validation is switched off.

    Args:
        tmp_path: Pytest fixture providing a temporary directory.

    Returns:
        TooldeckSettings: Settings instance configured for testing.
    """
    return TooldeckSettings(
        host="127.0.0.1",
        port=8000,
        data_dir=str(tmp_path),
        tools_dir="tools",
        global_tools_path=str(tmp_path / "global"),
        validate_global_path=False,
        log_level="DEBUG",
        cors_origins=["*"],
    )


@pytest.fixture
def test_app(test_settings):
    """Create a FastAPI test application instance.

    Args:
        test_settings: Test settings fixture.

    Returns:
        FastAPI: Configured test application.
    """
    return create_app(settings=test_settings)


@pytest_asyncio.fixture
async def async_client(test_app):
    """Create an async HTTP client for testing FastAPI endpoints.

    Args:
        test_app: Test application fixture.

    Yields:
        AsyncClient: Async HTTP client for making test requests.
    """
    # Trigger the lifespan startup manually for tests
    async with test_app.router.lifespan_context(test_app):
        transport = ASGITransport(app=test_app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
