"""
Pytest configuration and fixtures for testing.
"""
import time

import pytest

from vapid_auth.config.app_config import get_app_config
from vapid_auth.config.vapid_config import get_vapid_config
from vapid_auth.security import generate_vapid


@pytest.fixture
def vapid_keys():
    """Generate a fresh VAPID key pair."""
    return generate_vapid()


@pytest.fixture
def now():
    """Current Unix time in whole seconds."""
    return int(time.time())


@pytest.fixture
def valid_claims(now):
    """Claims a push service would accept."""
    return {
        "aud": "https://fcm.googleapis.com",
        "sub": "mailto:mail@mail.com",
        "exp": now + 12 * 3600,
    }


@pytest.fixture(autouse=True)
def clear_config_cache():
    """Config accessors are lru_cached; reset them around every test."""
    get_vapid_config.cache_clear()
    get_app_config.cache_clear()
    yield
    get_vapid_config.cache_clear()
    get_app_config.cache_clear()
