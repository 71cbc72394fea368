"""
Pytest configuration and fixtures for web app service tests
"""
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app

ENV_VARS = ["PORT", "HOST", "STATIC_DIR", "LOG_LEVEL", "LOG_FORMAT", "TIMEOUT_KEEP_ALIVE"]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep host environment variables out of settings resolution."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def static_dir(tmp_path):
    """Static root with a text asset, a binary asset and a file outside the root."""
    root = tmp_path / "static"
    (root / "img").mkdir(parents=True)
    (root / "app.css").write_text("body { color: #333; }\n")
    (root / "img" / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\xff\x00")
    (tmp_path / "secret.txt").write_text("top secret")
    return root


@pytest.fixture
def settings(static_dir):
    """Settings pointing at the temporary static root."""
    return Settings(static_dir=str(static_dir), log_format="console")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Create test client for FastAPI app."""
    with TestClient(app) as client:
        yield client
