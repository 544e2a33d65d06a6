"""Pydantic models for form and API I/O."""

from .player_form import NewPlayerForm, describe_validation_error

__all__ = ["NewPlayerForm", "describe_validation_error"]
