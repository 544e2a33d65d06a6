import pytest
from httpx import ASGITransport, AsyncClient

from puppybowl.api import create_app
from puppybowl.client import PlayerClient
from puppybowl.config import Settings

from tests.fake_api import API_URL, FakeRosterApi, sample_player


@pytest.fixture
async def client():
    api = FakeRosterApi([sample_player(123, "Buddy", teamId=None), sample_player(124, "Max")])
    player_client = PlayerClient(API_URL, transport=api.transport())
    app = create_app(Settings(api_url=API_URL), client=player_client)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        async_client.app = app
        async_client.fake_api = api
        yield async_client
    await player_client.aclose()


@pytest.mark.anyio
async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.anyio
async def test_root_redirects_to_ui(client: AsyncClient):
    resp = await client.get("/")
    assert resp.status_code == 307
    assert resp.headers["location"] == "/ui"


@pytest.mark.anyio
async def test_ui_home_lists_players(client: AsyncClient):
    resp = await client.get("/ui")
    assert resp.status_code == 200
    assert "Puppy Bowl" in resp.text
    assert resp.text.count('class="player-card"') == 2
    assert 'id="add-player-form"' in resp.text
    assert client.app.state.document.form_visible


@pytest.mark.anyio
async def test_free_agent_shown_in_detail_view(client: AsyncClient):
    await client.get("/ui")

    resp = await client.post("/ui/events", data={"details": "123"})

    assert resp.status_code == 200
    assert "<strong>Team ID:</strong> Free Agent" in resp.text
    assert 'id="back-button"' in resp.text

    resp = await client.post("/ui/events", data={"back": "1"})
    assert resp.text.count('class="player-card"') == 2


@pytest.mark.anyio
async def test_remove_event_refreshes_list(client: AsyncClient):
    await client.get("/ui")

    resp = await client.post("/ui/events", data={"remove": "124"})

    assert resp.status_code == 200
    assert resp.text.count('class="player-card"') == 1
    assert 124 not in client.fake_api.players


@pytest.mark.anyio
async def test_toggle_form_event(client: AsyncClient):
    await client.get("/ui")

    resp = await client.post("/ui/events", data={"toggle-form": "1"})
    assert 'id="new-player-form" style="display: none;"' in resp.text

    resp = await client.post("/ui/events", data={"toggle-form": "1"})
    assert 'id="new-player-form" style="display: block;"' in resp.text


@pytest.mark.anyio
async def test_add_player_form_submission(client: AsyncClient):
    await client.get("/ui")

    resp = await client.post(
        "/ui/players",
        data={"name": "Rex", "breed": "Boxer", "status": "bench", "imageUrl": "", "teamId": ""},
    )

    assert resp.status_code == 200
    assert "Player Rex has been added!" in resp.text
    assert resp.text.count('class="player-card"') == 3


@pytest.mark.anyio
async def test_add_player_invalid_form_is_not_an_error_page(client: AsyncClient):
    await client.get("/ui")

    resp = await client.post("/ui/players", data={"name": "", "breed": "Boxer", "status": "sleeping"})

    assert resp.status_code == 200
    assert "flash error" in resp.text
    assert not any(request.method == "POST" for request in client.fake_api.requests)


@pytest.mark.anyio
async def test_api_outage_renders_empty_page(client: AsyncClient, caplog):
    client.fake_api.reject_with = "Service unavailable"

    resp = await client.get("/ui")

    assert resp.status_code == 200
    assert 'class="player-card"' not in resp.text
    assert "Error fetching all players: Service unavailable" in caplog.text


@pytest.mark.anyio
async def test_add_player_form_fields_reach_payload(client: AsyncClient):
    await client.get("/ui")

    resp = await client.post(
        "/ui/players",
        data={"name": "Ace", "breed": "Beagle", "status": "bench", "imageUrl": "http://x/ace.jpg", "teamId": "7"},
    )

    assert resp.status_code == 200
    created = next(player for player in client.fake_api.players.values() if player["name"] == "Ace")
    assert created["imageUrl"] == "http://x/ace.jpg"
    assert created["teamId"] == 7
    assert created["status"] == "bench"


@pytest.mark.anyio
async def test_back_after_remove_reflects_latest_fetch(client: AsyncClient):
    await client.get("/ui")

    await client.post("/ui/events", data={"details": "123"})
    await client.post("/ui/events", data={"remove": "124"})
    resp = await client.post("/ui/events", data={"back": "1"})

    assert list(client.fake_api.players) == [123]
    assert resp.text.count('class="player-card"') == 1
    assert 'data-id="124"' not in resp.text
