"""
Shared test fixtures and utilities.
"""
from datetime import datetime, timedelta, timezone
import pytest
from src.core import config, dependencies


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point settings at a temporary local data directory."""
    directory = tmp_path / "data"
    monkeypatch.setenv("DATA_DIR", str(directory))
    monkeypatch.setenv("STORAGE_BACKEND", "local")
    config.settings = config.Settings()
    dependencies.clear_caches()
    
    yield directory
    
    monkeypatch.undo()
    dependencies.clear_caches()
    config.settings = config.Settings()


@pytest.fixture
def aws_env(monkeypatch):
    """Mock AWS credentials and S3 settings."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_REGION", "us-east-1")
    monkeypatch.setenv("S3_BUCKET_NAME", "test-bucket")
    monkeypatch.setenv("STORAGE_BACKEND", "s3")
    config.settings = config.Settings()
    dependencies.clear_caches()
    
    yield
    
    monkeypatch.undo()
    dependencies.clear_caches()
    config.settings = config.Settings()


class FakeClock:
    """Clock that advances one second on every call."""
    
    def __init__(self, start=None):
        self.current = start or datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
    
    def __call__(self):
        moment = self.current
        self.current += timedelta(seconds=1)
        return moment


@pytest.fixture
def fake_clock():
    return FakeClock()
