"""Markup builders for the roster views.

Each ``render_*`` function rebuilds one region of the document from the data it
is given. Nothing here talks to the API.
"""

from __future__ import annotations

import logging
from datetime import datetime
from html import escape
from typing import Mapping, Sequence

from puppybowl.dom import ALL_PLAYERS_CONTAINER_ID, NEW_PLAYER_FORM_ID, Document
from puppybowl.models import Player, PlayerStatus


logger = logging.getLogger("uvicorn.error")
logger.setLevel(logging.INFO)

CARD_PLACEHOLDER_IMAGE = "https://placedog.net/300/300"
DETAIL_PLACEHOLDER_IMAGE = "https://placedog.net/400/400"
FREE_AGENT_LABEL = "Free Agent"

STATUS_CHOICES: list[tuple[str, str]] = [
    (PlayerStatus.FIELD.value, "Field"),
    (PlayerStatus.BENCH.value, "Bench"),
]


def _format_date(value: datetime | None) -> str:
    if value is None:
        return "Unknown"
    return f"{value.month}/{value.day}/{value.year}"


def player_card_html(player: Player) -> str:
    team_label = FREE_AGENT_LABEL if player.is_free_agent else f"#{player.team_id}"
    name = escape(player.name)
    return f"""<div class=\"player-card\">
    <h3>{name}</h3>
    <img src=\"{escape(player.image_url or CARD_PLACEHOLDER_IMAGE)}\" alt=\"{name}\">
    <p>Breed: {escape(player.breed)}</p>
    <p>Team: {team_label}</p>
    <div class=\"button-container\">
        <button type=\"submit\" class=\"details-button\" name=\"details\" value=\"{player.id}\" data-id=\"{player.id}\">See Details</button>
        <button type=\"submit\" class=\"remove-button\" name=\"remove\" value=\"{player.id}\" data-id=\"{player.id}\">Remove</button>
    </div>
</div>"""


def player_detail_html(player: Player) -> str:
    team_label = FREE_AGENT_LABEL if player.is_free_agent else str(player.team_id)
    cohort_label = "" if player.cohort_id is None else str(player.cohort_id)
    name = escape(player.name)
    return f"""<div class=\"player-details\">
    <div class=\"player-detail-card\">
        <form method=\"post\" action=\"/ui/events\">
            <button type=\"submit\" id=\"back-button\" name=\"back\" value=\"1\">&larr; Back to all players</button>
        </form>
        <h2>{name}</h2>
        <img src=\"{escape(player.image_url or DETAIL_PLACEHOLDER_IMAGE)}\" alt=\"{name}\" class=\"detail-image\">
        <div class=\"player-info\">
            <p><strong>ID:</strong> #{player.id}</p>
            <p><strong>Breed:</strong> {escape(player.breed)}</p>
            <p><strong>Status:</strong> {player.status.value}</p>
            <p><strong>Team ID:</strong> {team_label}</p>
            <p><strong>Cohort ID:</strong> {cohort_label}</p>
            <p><strong>Created:</strong> {_format_date(player.created_at)}</p>
            <p><strong>Updated:</strong> {_format_date(player.updated_at)}</p>
        </div>
    </div>
</div>"""


def new_player_form_html(values: Mapping[str, str] | None = None, error: str | None = None) -> str:
    values = values or {}
    selected_status = values.get("status") or PlayerStatus.FIELD.value
    status_options = "".join(
        f'<option value="{value}"{" selected" if value == selected_status else ""}>{label}</option>'
        for value, label in STATUS_CHOICES
    )
    error_html = f"<p class='flash error'>{escape(error)}</p>" if error else ""
    return f"""<h2>Add New Player</h2>
{error_html}<form id=\"add-player-form\" method=\"post\" action=\"/ui/players\">
    <div class=\"form-group\">
        <label for=\"name\">Name:</label>
        <input type=\"text\" id=\"name\" name=\"name\" value=\"{escape(values.get('name', ''))}\" required>
    </div>
    <div class=\"form-group\">
        <label for=\"breed\">Breed:</label>
        <input type=\"text\" id=\"breed\" name=\"breed\" value=\"{escape(values.get('breed', ''))}\" required>
    </div>
    <div class=\"form-group\">
        <label for=\"status\">Status:</label>
        <select id=\"status\" name=\"status\" required>{status_options}</select>
    </div>
    <div class=\"form-group\">
        <label for=\"imageUrl\">Image URL:</label>
        <input type=\"url\" id=\"imageUrl\" name=\"imageUrl\" value=\"{escape(values.get('imageUrl', ''))}\" placeholder=\"{CARD_PLACEHOLDER_IMAGE}\">
    </div>
    <div class=\"form-group\">
        <label for=\"teamId\">Team ID:</label>
        <input type=\"number\" id=\"teamId\" name=\"teamId\" value=\"{escape(values.get('teamId', ''))}\" min=\"1\">
    </div>
    <button type=\"submit\">Add Player</button>
</form>"""


def render_all_players(document: Document, players: Sequence[Player] | None) -> None:
    if not players:
        logger.warning("No players to render")
        document.replace_container(ALL_PLAYERS_CONTAINER_ID, "")
        return
    cards = "\n".join(player_card_html(player) for player in players)
    document.replace_container(ALL_PLAYERS_CONTAINER_ID, cards)


def render_single_player(document: Document, player: Player | None) -> None:
    if player is None:
        logger.warning("No player to render")
        return
    document.replace_main(player_detail_html(player))


def render_new_player_form(
    document: Document,
    values: Mapping[str, str] | None = None,
    error: str | None = None,
) -> None:
    document.form_visible = True
    document.replace_container(NEW_PLAYER_FORM_ID, new_player_form_html(values, error))


def hide_new_player_form(document: Document) -> None:
    document.form_visible = False
