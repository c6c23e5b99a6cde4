from __future__ import annotations

from httpx import ASGITransport, AsyncClient

from app.main import app, settings


async def test_health_reports_timezone():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["timezone"] == settings.timezone
    assert payload["timestamp"]


async def test_trade_routes_are_mounted():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post("/trades/distance", json={"symbol": "ES", "entry_price": 5000, "exit_price": 5001})

    assert response.status_code == 200
    assert response.json()["pips_or_ticks"] == 4
