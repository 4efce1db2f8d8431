from datetime import datetime

from conftest import FakePinningClient
from pin_relay.api.deps import get_pinning_client
from pin_relay.main import app


def test_health_ok(client):
    r = client.get("/health")

    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    datetime.fromisoformat(body["timestamp"].replace("Z", "+00:00"))


def test_health_unaffected_by_failed_uploads(client):
    app.dependency_overrides[get_pinning_client] = lambda: FakePinningClient(fail=True)
    client.post("/api/upload-metadata", json={"name": "x"})
    client.post("/api/upload-image")

    r = client.get("/health")

    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_health_without_keys(unconfigured_client):
    assert unconfigured_client.get("/health").status_code == 200
