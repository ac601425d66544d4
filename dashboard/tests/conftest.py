import pytest


@pytest.fixture(autouse=True)
def utc_clock(settings):
    """Pin the clinic clock so date truncation in tests is predictable."""
    settings.TIME_ZONE = 'UTC'
