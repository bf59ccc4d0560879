"""Integration tests for the tools API endpoints."""

import pytest


@pytest.mark.asyncio
async def test_list_tools(async_client):
    """Test that the merged tool set is listed without provenance."""
    response = await async_client.get("/api/v1/tools")

    assert response.status_code == 200
    tools = response.json()["tools"]
    assert [tool["name"] for tool in tools] == ["alpha", "beta", "fail", "gamma", "slow"]

    alpha = tools[0]
    assert alpha["description"] == "First tool"
    assert alpha["input_schema"]["type"] == "object"
    assert set(alpha) == {"name", "description", "input_schema"}


@pytest.mark.asyncio
async def test_summary(async_client, test_settings):
    """Test the discovery summary endpoint."""
    response = await async_client.get("/api/v1/tools/summary")

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 5
    assert data["global_count"] == 1
    assert data["local_count"] == 4
    assert data["conflicts"] == ["beta"]
    assert data["global_path"] == test_settings.global_tools_path
    assert data["global_path_source"] == "environment"
    assert any("broken.py" in warning for warning in data["warnings"])


@pytest.mark.asyncio
async def test_call_tool(async_client):
    """Test calling a tool returns text content."""
    response = await async_client.post(
        "/api/v1/tools/gamma/call", json={"arguments": {"value": "x"}}
    )

    assert response.status_code == 200
    assert response.json() == {
        "name": "gamma",
        "content": [{"type": "text", "text": "gamma:x"}],
    }


@pytest.mark.asyncio
async def test_call_overridden_tool_uses_local(async_client):
    """Test that the local version of a conflicting tool is the one served."""
    response = await async_client.post("/api/v1/tools/beta/call", json={})

    assert response.status_code == 200
    assert response.json()["content"][0]["text"] == "local beta:"


@pytest.mark.asyncio
async def test_call_async_tool(async_client):
    """Test that async tools are awaited."""
    response = await async_client.post("/api/v1/tools/slow/call", json={"arguments": {}})

    assert response.status_code == 200
    assert response.json()["content"][0]["text"] == "slept"


@pytest.mark.asyncio
async def test_call_unknown_tool(async_client):
    """Test that an unknown tool name returns 404."""
    response = await async_client.post("/api/v1/tools/missing/call", json={})

    assert response.status_code == 404
    assert response.json()["detail"] == "Tool not found: missing"


@pytest.mark.asyncio
async def test_call_failing_tool(async_client):
    """Test that a raising tool returns 500 with the failure message."""
    response = await async_client.post("/api/v1/tools/fail/call", json={})

    assert response.status_code == 500
    assert response.json()["detail"] == "Tool execution failed: bad input"


@pytest.mark.asyncio
async def test_health_counts_tools(async_client):
    """Test that health reports the number of published tools."""
    response = await async_client.get("/api/v1/health")

    assert response.json()["tool_count"] == 5


@pytest.mark.asyncio
async def test_tools_unavailable_before_discovery(async_client, test_app):
    """Test that tool endpoints return 503 if discovery has not run."""
    delattr(test_app.state, "tool_registry")
    delattr(test_app.state, "discovery")

    assert (await async_client.get("/api/v1/tools")).status_code == 503
    assert (await async_client.get("/api/v1/tools/summary")).status_code == 503
