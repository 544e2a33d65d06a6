from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic.config import ConfigDict

from puppybowl.models import NewPlayer, PlayerStatus
from puppybowl.render import CARD_PLACEHOLDER_IMAGE


class NewPlayerForm(BaseModel):
    """Raw values posted by the add-player form."""

    name: str = Field(..., min_length=1)
    breed: str = Field(..., min_length=1)
    status: PlayerStatus = PlayerStatus.FIELD
    image_url: str = Field(default=CARD_PLACEHOLDER_IMAGE, alias="imageUrl")
    team_id: Optional[int] = Field(default=None, alias="teamId", ge=1)

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    @field_validator("status", mode="before")
    @classmethod
    def _blank_status_defaults_to_field(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return PlayerStatus.FIELD
        return value

    @field_validator("image_url", mode="before")
    @classmethod
    def _blank_image_uses_placeholder(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return CARD_PLACEHOLDER_IMAGE
        return value

    @field_validator("team_id", mode="before")
    @classmethod
    def _blank_team_is_free_agent(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        return value

    def to_payload(self) -> NewPlayer:
        return NewPlayer(
            name=self.name,
            breed=self.breed,
            status=self.status,
            image_url=self.image_url,
            team_id=self.team_id,
        )


def describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        field = ".".join(str(item) for item in error.get("loc", ())) or "form"
        parts.append(f"{field}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)
