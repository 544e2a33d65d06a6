"""In-memory page state owned by the application.

The document holds the markup of the regions the roster UI controls. Regions
are only ever replaced wholesale; nothing patches them in place.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable


ALL_PLAYERS_CONTAINER_ID = "all-players-container"
NEW_PLAYER_FORM_ID = "new-player-form"
MAIN_REGION = "main"


@dataclass(frozen=True)
class Notice:
    message: str
    expires_at: float


class Document:
    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._containers: dict[str, str] = {}
        self._notices: list[Notice] = []
        self._main_override: str | None = None
        self.form_visible = False
        self.reset()

    def reset(self) -> None:
        self._containers = {ALL_PLAYERS_CONTAINER_ID: "", NEW_PLAYER_FORM_ID: ""}
        self._notices = []
        self._main_override = None
        self.form_visible = False

    def container(self, element_id: str) -> str:
        if element_id not in self._containers:
            raise KeyError(f"Unknown container {element_id!r}")
        return self._containers[element_id]

    def replace_container(self, element_id: str, markup: str) -> None:
        if element_id not in self._containers:
            raise KeyError(f"Unknown container {element_id!r}")
        self._containers[element_id] = markup

    @property
    def showing_detail(self) -> bool:
        return self._main_override is not None

    def main_markup(self) -> str:
        if self._main_override is not None:
            return self._main_override
        display = "block" if self.form_visible else "none"
        return (
            f'<section id="{NEW_PLAYER_FORM_ID}" style="display: {display};">'
            f"{self._containers[NEW_PLAYER_FORM_ID]}</section>\n"
            '<form class="roster-events" method="post" action="/ui/events">'
            f'<div id="{ALL_PLAYERS_CONTAINER_ID}">{self._containers[ALL_PLAYERS_CONTAINER_ID]}</div>'
            "</form>"
        )

    def replace_main(self, markup: str) -> None:
        """Cover the main region with ``markup`` until restore_main is called.

        The regions underneath keep receiving renders, so restoring shows their
        current state rather than what was on screen before the swap.
        """

        self._main_override = markup

    def restore_main(self) -> bool:
        if self._main_override is None:
            return False
        self._main_override = None
        return True

    def add_notice(self, message: str, ttl: float) -> Notice:
        notice = Notice(message=message, expires_at=self._clock() + ttl)
        self._notices.append(notice)
        return notice

    def notices(self) -> list[Notice]:
        now = self._clock()
        self._notices = [notice for notice in self._notices if notice.expires_at > now]
        return list(self._notices)
