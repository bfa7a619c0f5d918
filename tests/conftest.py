"""Pytest fixtures for solartime tests.

This module provides test fixtures that ensure:
1. No network access (astropy must not download IERS or leap second tables)
2. Isolated test environment with controlled configuration
3. Shared locations and time zones used across the suites
"""

import os
from zoneinfo import ZoneInfo

import pytest

# Set test environment BEFORE importing library modules
os.environ.setdefault("SOLARTIME_IERS_AUTO_DOWNLOAD", "false")

from astropy.utils import iers

from solartime.models.location import Coordinates

iers.conf.auto_download = False


# =============================================================================
# Test Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Reset settings cache before each test to ensure clean state."""
    from solartime.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Location Fixtures
# =============================================================================


@pytest.fixture
def sample_coordinates() -> Coordinates:
    """Essen, Germany."""
    return Coordinates(latitude=51.449680, longitude=6.973370)


@pytest.fixture
def tromso_coordinates() -> Coordinates:
    """Tromsø, Norway: midnight sun in June, polar night in December."""
    return Coordinates(latitude=69.660716, longitude=18.925278)


@pytest.fixture
def nunavut_coordinates() -> Coordinates:
    """Alert, Nunavut: well inside the arctic circle."""
    return Coordinates(latitude=82.481306, longitude=-62.239533)


@pytest.fixture
def berlin() -> ZoneInfo:
    return ZoneInfo("Europe/Berlin")


@pytest.fixture
def oslo() -> ZoneInfo:
    return ZoneInfo("Europe/Oslo")
