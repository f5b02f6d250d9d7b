from __future__ import annotations

import logging

from chat_relay.core.settings import Settings

# Loggers that would otherwise echo every upstream HTTP request at INFO.
_NOISY_LOGGERS = ("httpx", "httpcore", "google_genai")


def configure_logging(settings: Settings) -> str:
    """Configure root logging and return the level name to hand to uvicorn.

    An unknown LOG_LEVEL falls back to INFO instead of failing startup.
    """
    level_name = (settings.log_level or "INFO").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    return logging.getLevelName(level).lower()
