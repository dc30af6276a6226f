"""Shared test fixtures."""
import pytest
from structlog.testing import capture_logs

from indonesia_utils.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so env changes made by a test are picked up."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def captured_logs():
    """Capture structlog events emitted during a test."""
    with capture_logs() as logs:
        yield logs


@pytest.fixture
def round_trip_amounts():
    return [0, 1000, 1234.56, 999999.99, -1000, -1234.56]
