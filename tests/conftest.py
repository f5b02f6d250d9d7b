import pytest

from chat_relay.core.settings import Settings


@pytest.fixture
def settings(monkeypatch) -> Settings:
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    return Settings(GOOGLE_API_KEY="test-key", _env_file=None)
