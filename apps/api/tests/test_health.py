import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.main import app, room_registry
from app.services.signaling import Participant


async def _noop_send(event: dict) -> None:
    return None


@pytest_asyncio.fixture
async def client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as http:
        yield http


@pytest.mark.asyncio
async def test_health_reports_active_rooms(client) -> None:
    empty = await client.get("/api/health")

    room_registry.add("ward-7", Participant(_noop_send))
    try:
        busy = await client.get("/api/health")
    finally:
        room_registry.clear()

    assert empty.json() == {"status": "ok", "active_rooms": 0}
    assert busy.json() == {"status": "ok", "active_rooms": 1}


@pytest.mark.asyncio
async def test_head_probes_answer_without_body(client) -> None:
    for path in ("/", "/api/health"):
        response = await client.head(path)
        assert response.status_code == 200
        assert response.content == b""


@pytest.mark.asyncio
async def test_landing_page_links_to_new_appointment(client) -> None:
    index = await client.get("/")

    assert index.status_code == 200
    assert 'href="/appointment"' in index.text


@pytest.mark.asyncio
async def test_robots_and_favicon(client) -> None:
    robots = await client.get("/robots.txt")
    favicon = await client.get("/favicon.ico")

    assert "Disallow: /appointment/" in robots.text
    assert favicon.headers.get("content-type") == "image/png"
