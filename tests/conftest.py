# ABOUTME: Shared test fixtures for the forecast aggregation test suite.
# ABOUTME: Provides a frozen clock and a fresh location store per test.

from datetime import UTC, datetime

import pytest

from src.location_store import InMemoryLocationStore

FROZEN_NOW = datetime(2024, 1, 1, 9, 30, tzinfo=UTC)


@pytest.fixture
def clock():
    return lambda: FROZEN_NOW


@pytest.fixture
def location_store() -> InMemoryLocationStore:
    return InMemoryLocationStore()
