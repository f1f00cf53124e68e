import pytest

from heyflow_trello.config import settings


@pytest.mark.asyncio
async def test_health_is_not_caught_by_the_webhook(client):
    response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == "0.1.0"


@pytest.mark.asyncio
async def test_integrations_reports_missing_credentials(client, monkeypatch):
    monkeypatch.setattr(settings, "trello_key", "")

    response = await client.get("/health/integrations")

    assert response.json()["trello"] == {
        "connected": False,
        "status": "credentials not configured",
        "last_check": None,
    }


@pytest.mark.asyncio
async def test_integrations_reports_configured_credentials(client, monkeypatch):
    monkeypatch.setattr(settings, "trello_key", "k")
    monkeypatch.setattr(settings, "trello_token", "t")

    response = await client.get("/health/integrations")

    trello = response.json()["trello"]
    assert trello["connected"] is True
    assert trello["status"] == "ok"
