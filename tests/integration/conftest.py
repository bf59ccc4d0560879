"""Pytest configuration for integration tests.

The tool directories are populated before the app starts, since discovery
runs once in the lifespan startup.
"""

import textwrap
from pathlib import Path

import pytest

from tooldeck import create_app


@pytest.fixture
def tool_dirs(test_settings, write_tool):
    """Populate global and local tool directories.

    Global: alpha, beta. Local: beta (overrides), gamma, slow (async), fail.
    """
    global_root = Path(test_settings.global_tools_path)
    global_tools = global_root / "tools"
    local_tools = test_settings.resolved_tools_dir

    write_tool(global_tools, "alpha", description="First tool")
    write_tool(global_tools, "beta", output="global beta")
    write_tool(local_tools, "beta", output="local beta")
    write_tool(local_tools, "gamma", description="Third tool")

    (local_tools / "slow.py").write_text(
        textwrap.dedent(
            """
            import asyncio


            async def run(args):
                await asyncio.sleep(0)
                return "slept"


            tool = {"name": "slow", "input_schema": {"type": "object"}, "run": run}
            """
        ),
        encoding="utf-8",
    )
    (local_tools / "fail.py").write_text(
        textwrap.dedent(
            """
            def run(args):
                raise ValueError("bad input")


            tool = {"name": "fail", "input_schema": {"type": "object"}, "run": run}
            """
        ),
        encoding="utf-8",
    )
    (local_tools / "broken.py").write_text("raise RuntimeError('boom')\n", encoding="utf-8")

    return global_root, local_tools


@pytest.fixture
def test_app(test_settings, tool_dirs):
    """Create the test application after the tool files exist."""
    return create_app(settings=test_settings)
