from __future__ import annotations

import os


def env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


class Config:
    API_TITLE = "Scriptures Gematria API"
    API_VERSION = "v1"
    OPENAPI_VERSION = "3.0.3"
    OPENAPI_URL_PREFIX = "/"
    OPENAPI_SWAGGER_UI_PATH = "/swagger-ui"
    OPENAPI_SWAGGER_UI_URL = "https://cdn.jsdelivr.net/npm/swagger-ui-dist/"

    # Level for the `scriptures` logger namespace.
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # POST /verses/gematria rejects larger verses with 413.
    MAX_VERSE_WORDS = _env_int("MAX_VERSE_WORDS", 500)

    # Method used by /temurah to value the transformed text.
    DEFAULT_METHOD = os.getenv("DEFAULT_METHOD", "standard")
