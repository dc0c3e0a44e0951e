import pytest
import os
from unittest.mock import AsyncMock, MagicMock
from dotenv import load_dotenv

@pytest.fixture(scope="session", autouse=True)
def _load_env():
    # Load .env once per session to avoid side-effects on import time
    load_dotenv()

def _truthy(v: str | None) -> bool:
    return v is not None and v.strip().lower() not in ("", "0", "false", "no")

@pytest.fixture(scope="session")
def allow_integration(_load_env) -> bool:
    # Depends on _load_env to ensure .env is loaded first
    return _truthy(os.getenv("RUN_INTEGRATION_TESTS"))

@pytest.fixture(scope="session")
def openai_api_key(_load_env) -> str | None:
    key = os.getenv("OPENAI_API_KEY")
    if not key or key == "sk-...":
        return None
    return key

def make_completion(content):
    """Shape of an OpenAI chat completion, reduced to what the analyzer reads."""
    response = MagicMock()
    response.choices = [MagicMock(message=MagicMock(content=content))]
    return response

@pytest.fixture
def completion():
    return make_completion

@pytest.fixture
def mock_client():
    """
    Stand-in for AsyncOpenAI. Set `mock_client.chat.completions.create.return_value`
    (or side_effect) per test.
    """
    client = MagicMock()
    client.chat.completions.create = AsyncMock()
    return client
