"""Page state shared between the renderer and the controller."""

from .document import (
    ALL_PLAYERS_CONTAINER_ID,
    MAIN_REGION,
    NEW_PLAYER_FORM_ID,
    Document,
    Notice,
)

__all__ = [
    "ALL_PLAYERS_CONTAINER_ID",
    "MAIN_REGION",
    "NEW_PLAYER_FORM_ID",
    "Document",
    "Notice",
]
