"""Process settings read from the environment (``backend/.env`` is loaded by server.py)."""

import os

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"


def get_host() -> str:
    return os.environ.get("HOST", "").strip() or DEFAULT_HOST


def get_port() -> int:
    """Port from PORT env or 3000. A non-numeric value is a startup error."""
    raw = os.environ.get("PORT", "").strip()
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {raw!r}") from None


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL


def get_cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]
