"""Event wiring between the page, the API client and the renderer.

Every card action posts to one route; the button's ``name`` is the action and
its ``value`` is the player id. Because markup is re-rendered wholesale after
each change, dispatch is keyed on those posted fields rather than on handlers
attached to individual elements.
"""

from __future__ import annotations

import logging
from typing import Mapping

from pydantic import ValidationError

from puppybowl.api.schemas import NewPlayerForm, describe_validation_error
from puppybowl.client import PlayerClient
from puppybowl.dom import Document
from puppybowl.render import (
    hide_new_player_form,
    render_all_players,
    render_new_player_form,
    render_single_player,
)


logger = logging.getLogger("uvicorn.error")
logger.setLevel(logging.INFO)

DETAILS_ACTION = "details"
REMOVE_ACTION = "remove"
BACK_ACTION = "back"
TOGGLE_FORM_ACTION = "toggle-form"

_PLAYER_ACTIONS = (DETAILS_ACTION, REMOVE_ACTION)
_PAGE_ACTIONS = (BACK_ACTION, TOGGLE_FORM_ACTION)

_FORM_FIELDS = ("name", "breed", "status", "imageUrl", "teamId")


def _parse_player_id(raw: str) -> int | None:
    try:
        return int(str(raw).strip())
    except ValueError:
        return None


class RosterController:
    def __init__(self, client: PlayerClient, document: Document, *, notice_seconds: float = 3.0):
        self.client = client
        self.document = document
        self.notice_seconds = notice_seconds

    async def init(self) -> None:
        """Page load: start from an empty document and render everything."""

        self.document.reset()
        players = await self.client.list_players()
        render_all_players(self.document, players)
        render_new_player_form(self.document)

    async def dispatch(self, fields: Mapping[str, str]) -> str | None:
        for action in _PLAYER_ACTIONS:
            if action not in fields:
                continue
            player_id = _parse_player_id(fields[action])
            if player_id is None:
                logger.warning("Ignoring %s event with invalid player id %r", action, fields[action])
                return None
            if action == DETAILS_ACTION:
                await self.show_details(player_id)
            else:
                await self.remove(player_id)
            return action

        for action in _PAGE_ACTIONS:
            if action not in fields:
                continue
            if action == BACK_ACTION:
                self.back()
            else:
                self.toggle_form()
            return action

        logger.warning("Ignoring unrecognised event with fields %s", sorted(fields))
        return None

    async def show_details(self, player_id: int) -> None:
        player = await self.client.get_player(player_id)
        render_single_player(self.document, player)

    async def remove(self, player_id: int) -> None:
        await self.client.delete_player(player_id)
        players = await self.client.list_players()
        render_all_players(self.document, players)

    def back(self) -> None:
        if not self.document.restore_main():
            logger.warning("Back requested with no saved view")

    def toggle_form(self) -> None:
        if self.document.form_visible:
            hide_new_player_form(self.document)
        else:
            render_new_player_form(self.document)

    async def submit_new_player(self, fields: Mapping[str, str]) -> bool:
        values = {key: str(fields.get(key) or "") for key in _FORM_FIELDS}
        try:
            form = NewPlayerForm.model_validate(values)
        except ValidationError as exc:
            logger.warning("Rejected new player form: %s", describe_validation_error(exc))
            render_new_player_form(self.document, values, error=describe_validation_error(exc))
            return False

        new_player = await self.client.create_player(form.to_payload())
        if new_player is None:
            render_new_player_form(self.document, values)
            return False

        render_new_player_form(self.document)
        players = await self.client.list_players()
        render_all_players(self.document, players)
        self.document.add_notice(f"Player {new_player.name} has been added!", self.notice_seconds)
        return True
