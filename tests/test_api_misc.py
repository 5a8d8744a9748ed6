from fastapi.testclient import TestClient
from backend.api import app

client = TestClient(app)

def test_cors_headers():
    # Simple check if CORS middleware is active
    response = client.options(
        "/ai/get-review",
        headers={
            "Origin": "http://localhost:8501",
            "Access-Control-Request-Method": "POST",
        }
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:8501"

def test_review_route_rejects_get():
    response = client.get("/ai/get-review")
    assert response.status_code == 405

def test_gateway_times_out_before_the_client():
    from backend.config import Settings
    from frontend.config import ClientSettings

    gateway_settings = Settings(_env_file=None)
    client_settings = ClientSettings(_env_file=None)
    assert gateway_settings.UPSTREAM_TIMEOUT < client_settings.REQUEST_TIMEOUT
