"""Canonical roster models."""

from .player import NewPlayer, Player, PlayerStatus

__all__ = ["NewPlayer", "Player", "PlayerStatus"]
