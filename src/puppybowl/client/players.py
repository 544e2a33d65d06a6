"""Async client for the Puppy Bowl players resource.

Every public call is fail-soft: network failures and API-reported errors are
logged and turned into an empty or absent result, so callers never need an
error path of their own. Anything else is a bug and is allowed to raise.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx
from pydantic import ValidationError

from puppybowl.models import NewPlayer, Player


logger = logging.getLogger("uvicorn.error")
logger.setLevel(logging.INFO)

PLAYERS_PATH = "/players"


class ApiError(Exception):
    """Raised when the API answers with an error envelope or an unusable body."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def unwrap_envelope(response: httpx.Response, key: str | None) -> Any:
    """Return ``data[key]`` from a ``{data, error}`` envelope or raise ApiError.

    With ``key=None`` only the error checks run and ``data`` is returned as-is.
    """

    try:
        body = response.json()
    except ValueError as exc:
        raise ApiError(f"Invalid JSON from {response.request.url}", response.status_code) from exc

    if not isinstance(body, dict):
        raise ApiError(f"Unexpected response body from {response.request.url}", response.status_code)

    error = body.get("error")
    if error:
        raise ApiError(str(error), response.status_code)
    if response.is_error:
        raise ApiError(f"HTTP {response.status_code} from {response.request.url}", response.status_code)

    data = body.get("data")
    if key is None:
        return data
    if not isinstance(data, dict) or key not in data:
        raise ApiError(f"Response is missing data.{key}", response.status_code)
    return data[key]


def _parse_player(raw: Any) -> Player:
    try:
        return Player.model_validate(raw)
    except ValidationError as exc:
        raise ApiError(f"Malformed player payload: {exc}") from exc


class PlayerClient:
    """Thin wrapper around the four player endpoints."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._http = httpx.AsyncClient(base_url=self.base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> "PlayerClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def list_players(self) -> list[Player]:
        try:
            response = await self._http.get(PLAYERS_PATH)
            raw_players = unwrap_envelope(response, "players")
            if not isinstance(raw_players, list):
                raise ApiError("data.players is not a list", response.status_code)
            return [_parse_player(raw) for raw in raw_players]
        except (httpx.HTTPError, ApiError) as exc:
            logger.error("Error fetching all players: %s", exc)
            return []

    async def get_player(self, player_id: int) -> Player | None:
        try:
            response = await self._http.get(f"{PLAYERS_PATH}/{player_id}")
            return _parse_player(unwrap_envelope(response, "player"))
        except (httpx.HTTPError, ApiError) as exc:
            logger.error("Error fetching player #%s: %s", player_id, exc)
            return None

    async def create_player(self, fields: NewPlayer | Mapping[str, Any]) -> Player | None:
        payload = fields.to_json() if isinstance(fields, NewPlayer) else dict(fields)
        try:
            response = await self._http.post(PLAYERS_PATH, json=payload)
            return _parse_player(unwrap_envelope(response, "newPlayer"))
        except (httpx.HTTPError, ApiError) as exc:
            logger.error("Error adding new player: %s", exc)
            return None

    async def delete_player(self, player_id: int) -> None:
        try:
            response = await self._http.delete(f"{PLAYERS_PATH}/{player_id}")
            unwrap_envelope(response, None)
        except (httpx.HTTPError, ApiError) as exc:
            logger.error("Error removing player #%s: %s", player_id, exc)
            return
        logger.info("Player #%s was successfully removed", player_id)
