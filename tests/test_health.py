"""Tests for health check endpoint."""

import pytest


@pytest.mark.asyncio
async def test_health_endpoint(app_client):
    """Health endpoint returns 200 with expected fields."""
    response = await app_client.get("/health")
    assert response.status_code == 200

    data = response.json()
    assert data["status"] == "ok"
    assert data["backend"] == "python-fastapi"
    assert data["books"] == 10
    assert data["users"] == 0
    assert "version" in data
    assert "timestamp" in data
