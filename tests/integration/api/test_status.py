import pytest
from httpx import ASGITransport, AsyncClient
from unittest.mock import AsyncMock, MagicMock

from config import ApplicationConfig
from src.app.repositories.errors import StoreError
from src.depends import get_unit_of_work


def _override_with(app, uow):
    async def override_get_unit_of_work():
        yield uow

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work


@pytest.fixture
def broken_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)
    uow.commit = AsyncMock(side_effect=StoreError("server closed the connection"))
    uow.rollback = AsyncMock()
    uow.ping = AsyncMock(return_value=False)
    uow.action_events.create = AsyncMock(side_effect=lambda event: event)
    uow.action_events.summarize_by_action = AsyncMock(
        side_effect=StoreError("server closed the connection")
    )
    return uow


@pytest.mark.asyncio
async def test_status_reports_connected_database(client: AsyncClient):
    response = await client.get("/v1/status")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "success"
    assert body["data"]["database"] == "connected"
    assert body["data"]["timestamp"].endswith("Z")


@pytest.mark.asyncio
async def test_root_health_probe(client: AsyncClient):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json() == {
        "status": "active",
        "version": ApplicationConfig.VERSION,
        "database": "connected",
    }


@pytest.mark.asyncio
async def test_unknown_route_returns_404(client: AsyncClient, test_data):
    response = await client.get("/v1/does-not-exist")

    assert response.status_code == 404
    assert response.json() == test_data.get_copy("not_found_response")


@pytest.mark.asyncio
async def test_status_reports_disconnected_database(app, broken_uow):
    _override_with(app, broken_uow)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.get("/v1/status")

    assert response.status_code == 200
    assert response.json()["data"]["database"] == "disconnected"


@pytest.mark.asyncio
async def test_store_failure_returns_500_with_details_in_development(app, broken_uow, monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "ENVIRONMENT", "development")
    _override_with(app, broken_uow)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        record = await ac.post("/v1/actions", json={"userId": "u1", "action": "read"})
        analytics = await ac.get("/v1/analytics/u1")

    for response in (record, analytics):
        assert response.status_code == 500
        body = response.json()
        assert body["status"] == "error"
        assert body["message"] == "Internal server error"
        assert "server closed the connection" in body["details"]


@pytest.mark.asyncio
async def test_store_failure_hides_details_in_production(app, broken_uow, monkeypatch):
    monkeypatch.setattr(ApplicationConfig, "ENVIRONMENT", "production")
    _override_with(app, broken_uow)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.get("/v1/analytics/u1")

    assert response.status_code == 500
    assert response.json() == {"status": "error", "message": "Internal server error"}


@pytest.mark.asyncio
async def test_unexpected_error_returns_generic_500(app, broken_uow, monkeypatch):
    """Exceptions outside the store error path still get the error envelope"""
    monkeypatch.setattr(ApplicationConfig, "ENVIRONMENT", "development")
    broken_uow.action_events.summarize_by_action = AsyncMock(side_effect=RuntimeError("boom"))
    _override_with(app, broken_uow)

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        response = await ac.get("/v1/analytics/u1")

    assert response.status_code == 500
    assert response.json() == {
        "status": "error",
        "message": "Internal server error",
        "details": "boom",
    }
