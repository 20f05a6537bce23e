import os
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient
from langchain_core.messages import AIMessage

os.environ.setdefault("LLM_API_KEY", "test-api-key")

from neura import main  # noqa: E402
from neura.config import ClientSettings, Settings, get_settings  # noqa: E402
from neura.services.chat import RelayService  # noqa: E402
from neura.services.persona import Persona, SeedExchange  # noqa: E402


@pytest.fixture
def test_settings():
    """Settings with a dummy credential (no real provider calls)."""
    return Settings(_env_file=None, llm_api_key="test-api-key")


@pytest.fixture
def client_settings():
    return ClientSettings(_env_file=None, relay_url="http://relay.test/api/chat")


@pytest.fixture
def fake_llm():
    """Chat model stand-in; set `ainvoke.return_value` / `side_effect` per test."""
    llm = MagicMock()
    llm.ainvoke = AsyncMock(return_value=AIMessage(content="I'm here for you."))
    return llm


@pytest.fixture
def persona():
    return Persona(
        name="test",
        instructions="Be kind.",
        seed=(SeedExchange(user="Hi there.", assistant="Hello, how can I help?"),),
    )


@pytest.fixture
def relay(fake_llm, persona):
    return RelayService(fake_llm, persona)


@pytest.fixture
def test_client(monkeypatch, fake_llm):
    """FastAPI test client with the chat model replaced by `fake_llm`."""
    get_settings.cache_clear()
    monkeypatch.setattr(main, "get_chat_llm", lambda settings: fake_llm)
    with TestClient(main.app) as client:
        yield client
    get_settings.cache_clear()
