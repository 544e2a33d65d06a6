import pytest
from pydantic import ValidationError

from puppybowl.models import NewPlayer, Player, PlayerStatus

from tests.fake_api import sample_player


def test_player_parses_camel_case_payload():
    player = Player.model_validate(sample_player(7, extraField="ignored"))

    assert player.id == 7
    assert player.status is PlayerStatus.FIELD
    assert player.image_url == "http://example.com/buddy.jpg"
    assert player.team_id == 456
    assert player.cohort_id == 789
    assert player.created_at is not None and player.created_at.year == 2023
    assert not player.is_free_agent


def test_player_without_team_is_free_agent():
    player = Player.model_validate(sample_player(teamId=None, imageUrl=None))
    assert player.is_free_agent
    assert player.image_url is None


def test_player_is_frozen():
    player = Player.model_validate(sample_player())
    with pytest.raises((TypeError, ValidationError)):
        player.name = "Other"  # type: ignore[misc]


def test_player_rejects_unknown_status():
    with pytest.raises(ValidationError):
        Player.model_validate(sample_player(status="injured"))


def test_new_player_json_uses_wire_names():
    payload = NewPlayer(name="Rex", breed="Boxer", status="bench", image_url="http://x/rex.jpg", team_id=3)
    assert payload.to_json() == {
        "name": "Rex",
        "breed": "Boxer",
        "status": "bench",
        "imageUrl": "http://x/rex.jpg",
        "teamId": 3,
    }
