"""Runtime settings resolved from environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


logger = logging.getLogger("uvicorn.error")
logger.setLevel(logging.INFO)

_API_URL_ENV = "PUPPYBOWL_API_URL"
_TIMEOUT_ENV = "PUPPYBOWL_TIMEOUT"
_NOTICE_SECONDS_ENV = "PUPPYBOWL_NOTICE_SECONDS"

DEFAULT_API_URL = "https://fsa-puppy-bowl.herokuapp.com/api/2306-FSA-ET-WEB-FT-SF"
_TIMEOUT_DEFAULT = 10.0
_NOTICE_SECONDS_DEFAULT = 3.0


def _env_float(name: str, default: float, *, clamp_min: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    return value


@dataclass(frozen=True)
class Settings:
    api_url: str = DEFAULT_API_URL
    timeout: float = _TIMEOUT_DEFAULT
    notice_seconds: float = _NOTICE_SECONDS_DEFAULT

    @classmethod
    def from_env(cls) -> "Settings":
        api_url = (os.getenv(_API_URL_ENV) or "").strip() or DEFAULT_API_URL
        return cls(
            api_url=api_url.rstrip("/"),
            timeout=_env_float(_TIMEOUT_ENV, _TIMEOUT_DEFAULT, clamp_min=0.1),
            notice_seconds=_env_float(_NOTICE_SECONDS_ENV, _NOTICE_SECONDS_DEFAULT, clamp_min=0.0),
        )
