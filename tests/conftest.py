import pytest
from datetime import datetime
from unittest.mock import MagicMock

from status_api.schemas.status import StatusReadingResponse
from status_api.services.storage import StatusStore

@pytest.fixture
def sample_readings():
    return [
        StatusReadingResponse(
            status_id=1,
            device_id=1,
            uptime=100,
            temperature_c=20,
            created_at=datetime(2026, 10, 18, 7, 0, 0)
        ),
        StatusReadingResponse(
            status_id=2,
            device_id=1,
            uptime=160,
            temperature_c=21,
            created_at=datetime(2026, 10, 18, 7, 1, 0)
        )
    ]

@pytest.fixture
def mock_env_vars(monkeypatch):
    monkeypatch.setenv("DB_HOST", "localhost")
    monkeypatch.setenv("DB_PORT", "5432")
    monkeypatch.setenv("DB_NAME", "test_db")
    monkeypatch.setenv("DB_USER", "test_user")
    monkeypatch.setenv("DB_PASSWORD", "test_password")
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("DB_PASSWORD_FILE", raising=False)

@pytest.fixture
def password_secret_file(tmp_path):
    """Database password mounted as a secret file"""
    secret = tmp_path / "db-password"
    secret.write_text("s3cr3t@pass\n")
    return str(secret)

@pytest.fixture
def mock_status_store():
    """Status store whose device lookup matches exactly one device by default"""
    store = MagicMock(spec=StatusStore)
    store.count_devices_matching.return_value = 1
    return store
