import pytest
from fastapi.testclient import TestClient
from backend.api import app, get_gemini_client, limiter

# Disable rate limiting for all tests
limiter.enabled = False

@pytest.fixture(scope="module")
def client():
    return TestClient(app)

@pytest.fixture
def base_payload():
    return {"code": "function f(){}"}

@pytest.fixture(autouse=True)
def fresh_gemini_client():
    # each test patches genai.Client, so the shared client must be rebuilt
    get_gemini_client.cache_clear()
    yield
    get_gemini_client.cache_clear()
