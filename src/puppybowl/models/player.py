"""Player models shared by the API client, renderer and controller."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class PlayerStatus(str, Enum):
    FIELD = "field"
    BENCH = "bench"


class Player(BaseModel):
    """Roster entry as returned by the Puppy Bowl API."""

    id: int
    name: str
    breed: str
    status: PlayerStatus
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    team_id: Optional[int] = Field(default=None, alias="teamId")
    cohort_id: Optional[int] = Field(default=None, alias="cohortId")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @property
    def is_free_agent(self) -> bool:
        return not self.team_id


class NewPlayer(BaseModel):
    """Payload submitted when adding a player to the roster."""

    name: str = Field(..., min_length=1)
    breed: str = Field(..., min_length=1)
    status: PlayerStatus = PlayerStatus.FIELD
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    team_id: Optional[int] = Field(default=None, alias="teamId", ge=1)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
