"""HTTP access to the remote roster API."""

from .players import ApiError, PlayerClient, unwrap_envelope

__all__ = ["ApiError", "PlayerClient", "unwrap_envelope"]
