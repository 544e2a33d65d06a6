"""HTML rendering for the roster views."""

from .page import render_page
from .views import (
    CARD_PLACEHOLDER_IMAGE,
    DETAIL_PLACEHOLDER_IMAGE,
    FREE_AGENT_LABEL,
    hide_new_player_form,
    new_player_form_html,
    player_card_html,
    player_detail_html,
    render_all_players,
    render_new_player_form,
    render_single_player,
)

__all__ = [
    "CARD_PLACEHOLDER_IMAGE",
    "DETAIL_PLACEHOLDER_IMAGE",
    "FREE_AGENT_LABEL",
    "hide_new_player_form",
    "new_player_form_html",
    "player_card_html",
    "player_detail_html",
    "render_all_players",
    "render_new_player_form",
    "render_page",
    "render_single_player",
]
