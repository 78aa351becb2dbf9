"""Pytest configuration and fixtures for rest_errors tests."""

from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest

from rest_errors.core.config import get_settings
from rest_errors.shared.errors import ErrorNormalizer
from rest_errors.tests.factories import RecordingSink


# ==================== Settings Fixtures ====================


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test against default settings, unaffected by the host environment."""
    for name in ("APP_ENVIRONMENT", "ERRORS_VALIDATE_DETAILS", "LOG_FORMAT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def production_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Switch settings to production-like mode."""
    monkeypatch.setenv("APP_ENVIRONMENT", "production")
    get_settings.cache_clear()


# ==================== Normalizer Fixtures ====================


@pytest.fixture
def normalizer() -> ErrorNormalizer:
    """Normalizer with 422 details validation enabled."""
    return ErrorNormalizer(validate_details=True)


@pytest.fixture
def relaxed_normalizer() -> ErrorNormalizer:
    """Normalizer with 422 details validation disabled."""
    return ErrorNormalizer(validate_details=False)


@pytest.fixture
def sink() -> RecordingSink:
    """A fresh response sink with no response started."""
    return RecordingSink()


@pytest.fixture
def call_next() -> MagicMock:
    """Mock next handler of the pipeline."""
    return MagicMock(name="call_next", return_value=None)
