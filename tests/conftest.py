"""Test configuration and fixtures."""

import pytest

from hivemind.config import AuthSettings, Settings


@pytest.fixture
def auth_settings() -> AuthSettings:
    """Auth settings the app under test verifies tokens with."""
    return Settings().auth
