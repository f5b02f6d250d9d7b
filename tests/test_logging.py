import logging

from chat_relay.core.logging import configure_logging
from chat_relay.core.settings import Settings


def test_configure_logging_returns_uvicorn_level(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    assert configure_logging(Settings(LOG_LEVEL="debug", _env_file=None)) == "debug"
    assert logging.getLogger("uvicorn.error").level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING


def test_configure_logging_unknown_level_falls_back_to_info(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    assert configure_logging(Settings(LOG_LEVEL="loud", _env_file=None)) == "info"
    assert logging.getLogger("uvicorn.access").level == logging.INFO
