"""Test configuration and fixtures."""

import logfire
import pytest

from board.config import AuthSettings, BoardSettings
from tests.factories import ADMIN_SUBJECT, TEST_JWT_SECRET

# Local-only Logfire so spans and events are exercised without sending
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture(autouse=True)
def test_settings_env(monkeypatch):
    """Test configuration, read by Settings() inside the DI container."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("AUTH__JWT_SECRET", TEST_JWT_SECRET)
    monkeypatch.setenv("AUTH__ADMIN_SUBJECTS", f'["{ADMIN_SUBJECT}"]')
    monkeypatch.setenv("DATABASE__URL", "sqlite+aiosqlite:///:memory:")


@pytest.fixture
def auth_settings() -> AuthSettings:
    """Auth settings matching the test environment."""
    return AuthSettings(jwt_secret=TEST_JWT_SECRET, admin_subjects=[ADMIN_SUBJECT])


@pytest.fixture
def board_settings() -> BoardSettings:
    """Default board settings."""
    return BoardSettings()
