"""Web surface for the Puppy Bowl roster client."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from puppybowl.api.controller import RosterController
from puppybowl.client import PlayerClient
from puppybowl.config import Settings
from puppybowl.dom import Document
from puppybowl.render import render_page


def create_app(settings: Settings | None = None, client: PlayerClient | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    owns_client = client is None
    player_client = client or PlayerClient(settings.api_url, timeout=settings.timeout)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        try:
            yield
        finally:
            if owns_client:
                await player_client.aclose()

    app = FastAPI(title="Puppy Bowl", lifespan=lifespan)
    document = Document()
    controller = RosterController(player_client, document, notice_seconds=settings.notice_seconds)
    app.state.settings = settings
    app.state.player_client = player_client
    app.state.document = document
    app.state.controller = controller

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/")
    async def root() -> RedirectResponse:
        return RedirectResponse(url="/ui", status_code=307)

    @app.get("/ui", response_class=HTMLResponse)
    async def ui_index():
        await controller.init()
        return HTMLResponse(render_page(document))

    @app.post("/ui/events", response_class=HTMLResponse)
    async def ui_event(request: Request):
        form = await request.form()
        fields = {key: str(value) for key, value in form.items()}
        await controller.dispatch(fields)
        return HTMLResponse(render_page(document))

    @app.post("/ui/players", response_class=HTMLResponse)
    async def ui_add_player(
        name: str = Form(""),
        breed: str = Form(""),
        status: str = Form(""),
        image_url: str = Form("", alias="imageUrl"),
        team_id: str = Form("", alias="teamId"),
    ):
        fields = {"name": name, "breed": breed, "status": status, "imageUrl": image_url, "teamId": team_id}
        await controller.submit_new_player(fields)
        return HTMLResponse(render_page(document))

    return app


__all__ = ["RosterController", "create_app"]
