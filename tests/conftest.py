"""Shared fixtures: a TestClient wired to a fake pinning client."""

import os

import pytest
from fastapi.testclient import TestClient

# keep a developer's real keys out of the test run
os.environ.pop("PINATA_API_KEY", None)
os.environ.pop("PINATA_SECRET_KEY", None)
os.environ.pop("PINATA_SECRET_API_KEY", None)

from pin_relay.api.deps import get_pinning_client
from pin_relay.core.config import Settings, get_settings
from pin_relay.main import app
from pin_relay.schemas.pinata import PinResult
from pin_relay.services.pinata import PinningError

GATEWAY = "https://gateway.pinata.cloud/ipfs"
FAKE_HASH = "QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG"


class FakePinningClient:
    def __init__(self, ipfs_hash: str = FAKE_HASH, fail: bool = False):
        self.ipfs_hash = ipfs_hash
        self.fail = fail
        self.files = []
        self.documents = []

    def pin_file(self, content, filename, content_type):
        self.files.append((content, filename, content_type))
        if self.fail:
            raise PinningError("pin_failed: upstream returned 502")
        return PinResult(IpfsHash=self.ipfs_hash, PinSize=1234, Timestamp="2024-05-01T12:00:00Z")

    def pin_json(self, document, name):
        self.documents.append((document, name))
        if self.fail:
            raise PinningError("pin_failed: connection refused")
        return PinResult(IpfsHash=self.ipfs_hash, PinSize=1234, Timestamp="2024-05-01T12:00:00Z")


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        PINATA_API_KEY="test-key",
        PINATA_SECRET_KEY="test-secret",
    )


@pytest.fixture
def pinning_client():
    return FakePinningClient()


@pytest.fixture
def client(settings, pinning_client):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_pinning_client] = lambda: pinning_client
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def unconfigured_client():
    """Real dependency chain with no credentials configured."""
    app.dependency_overrides[get_settings] = lambda: Settings(_env_file=None)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
