"""
Pytest configuration and shared fixtures.

Provides test configuration instances and sample series for unit and integration tests.
"""

import math
from typing import List

import pytest

from riskstats.core.config import Config


@pytest.fixture
def mock_config():
    """
    Fixture providing test configuration with explicit values.

    Used to override environment-based config in unit tests.
    Ensures tests run consistently regardless of .env settings.

    Returns:
        Config: Test instance with sensible defaults for testing
    """
    return Config(
        _env_file=None,
        log_level="WARNING",  # Reduce noise in test output
        logs_dir=None,
    )


@pytest.fixture
def spike_series() -> List[float]:
    """Ten daily transaction counts with a single obvious spike at index 6."""
    return [10.0, 11.0, 10.0, 12.0, 11.0, 10.0, 100.0, 11.0, 10.0, 12.0]


@pytest.fixture
def masked_series() -> List[float]:
    """Two outliers where the larger one hides the smaller from a single pass."""
    return [10.0, 11.0, 10.0, 100.0, 11.0, 10.0, 200.0, 11.0, 10.0, 12.0]


@pytest.fixture
def step_series() -> List[float]:
    """Control failure rate that jumps from 10 to 30 and stays there."""
    return [10.0] * 10 + [30.0] * 10


@pytest.fixture
def seasonal_series() -> List[float]:
    """Weekly-style cycle of period 3 repeated eight times."""
    return [1.0, 2.0, 3.0] * 8


@pytest.fixture
def ramp_series() -> List[float]:
    return [float(i) for i in range(1, 31)]


@pytest.fixture
def noisy_uptrend() -> List[float]:
    """Rising risk score with a deterministic wobble."""
    return [50.0 + 2.0 * i + 3.0 * math.sin(i) for i in range(40)]


def pytest_configure(config):
    """
    Pytest hook for custom configuration.

    Registers custom markers used throughout tests.
    """
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running (deferred CI)"
    )
