"""Unit tests for the health check endpoint."""

import pytest


@pytest.mark.asyncio
async def test_health_check_returns_ok(async_client):
    """Test that health check returns status ok."""
    response = await async_client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == "0.1.0"


@pytest.mark.asyncio
async def test_health_check_response_structure(async_client):
    """Test that health check response has correct structure."""
    response = await async_client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()

    assert "status" in data
    assert "version" in data
    assert "tool_count" in data


@pytest.mark.asyncio
async def test_health_check_content_type(async_client):
    """Test that health check returns JSON content type."""
    response = await async_client.get("/api/v1/health")

    assert response.status_code == 200
    assert "application/json" in response.headers["content-type"]


@pytest.mark.asyncio
async def test_health_check_counts_tools(async_client):
    """Test that tool_count reflects the (empty) discovery."""
    response = await async_client.get("/api/v1/health")

    assert response.json()["tool_count"] == 0


@pytest.mark.asyncio
async def test_health_check_before_discovery(async_client, test_app):
    """Test health check when discovery has not populated app.state."""
    if hasattr(test_app.state, "tool_registry"):
        delattr(test_app.state, "tool_registry")

    response = await async_client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json()["tool_count"] is None
