"""Test configuration and fixtures."""

import pytest

from bodycheck.config.settings import settings
from bodycheck.features.validation.descriptors import describe


@pytest.fixture(autouse=True)
def clear_descriptor_cache():
    """Rebuild descriptors for every test so warnings and strict mode are observable.

    Descriptors are cached per record type; without clearing, a warning logged
    by an earlier test would not be logged again.
    """
    describe.cache_clear()
    yield
    describe.cache_clear()


@pytest.fixture
def strict_settings(monkeypatch):
    """Enable strict condition checking through settings."""
    monkeypatch.setattr(settings, "strict_rules", True)
    return settings


@pytest.fixture
def quiet_password_diagnostics(monkeypatch):
    """Disable password sub-check logging."""
    monkeypatch.setattr(settings, "password_diagnostics", False)
    return settings
