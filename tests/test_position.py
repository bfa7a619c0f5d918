"""Tests for the astropy sun position."""

from datetime import datetime, timezone

import pytest

from solartime.astronomy.ephemeris import compute_angles
from solartime.astronomy.position import get_sun_position
from solartime.astronomy.projector import (
    calculate_solar_noon,
    calculate_sunrise,
    calculate_sunset,
)
from solartime.errors import InvalidCoordinateError, NaiveDatetimeError
from solartime.models.location import Coordinates


class TestSunPosition:
    """Tests for sun position calculations."""

    def test_sun_position_midday(self, sample_coordinates: Coordinates):
        """Test sun position at midday."""
        midday = datetime(2019, 6, 21, 12, 0, tzinfo=timezone.utc)  # ~2pm CEST
        position = get_sun_position(midday, *sample_coordinates.to_tuple())

        # Sun should be high in the sky
        assert position.altitude_deg > 50
        assert position.is_day is True

    def test_sun_position_midnight(self, sample_coordinates: Coordinates):
        """Test sun position at midnight."""
        midnight = datetime(2019, 6, 21, 0, 0, tzinfo=timezone.utc)  # ~2am CEST
        position = get_sun_position(midnight, *sample_coordinates.to_tuple())

        # Sun should be below horizon
        assert position.altitude_deg < 0
        assert position.is_day is False

    def test_sun_position_southern_hemisphere(self):
        """Test sun position in southern hemisphere."""
        # Sydney in December (summer there)
        summer_noon = datetime(2019, 12, 21, 2, 0, tzinfo=timezone.utc)  # ~1pm AEDT
        position = get_sun_position(summer_noon, -33.8688, 151.2093)

        assert position.altitude_deg > 60
        assert position.is_day is True

    def test_azimuth_range(self, sample_coordinates: Coordinates):
        """Test that azimuth is always in valid range."""
        for hour in (0, 6, 12, 18):
            time = datetime(2019, 6, 21, hour, 0, tzinfo=timezone.utc)
            position = get_sun_position(time, *sample_coordinates.to_tuple())
            assert 0 <= position.azimuth_deg < 360

    def test_keeps_caller_time(self, sample_coordinates, berlin):
        time = datetime(2019, 1, 24, 12, 0, tzinfo=berlin)
        assert get_sun_position(time, *sample_coordinates.to_tuple()).time is time


class TestAgainstSeries:
    """Cross-check the low-precision series against astropy."""

    @pytest.mark.parametrize("month", [1, 4, 6, 9, 12])
    def test_altitude_at_sunrise_and_sunset(self, sample_coordinates, berlin, month):
        """Test the sun sits near -0.833° at the computed sunrise and sunset."""
        coords = sample_coordinates.to_tuple()
        day = datetime(2019, month, 24, tzinfo=berlin)

        for event in (calculate_sunrise(day, *coords), calculate_sunset(day, *coords)):
            assert get_sun_position(event, *coords).altitude_deg == pytest.approx(-0.833, abs=0.5)

    @pytest.mark.parametrize("month", [1, 4, 6, 9, 12])
    def test_solar_noon(self, sample_coordinates, berlin, month):
        """Test the sun is due south at the computed solar noon."""
        coords = sample_coordinates.to_tuple()
        noon = calculate_solar_noon(datetime(2019, month, 24, tzinfo=berlin), *coords)
        position = get_sun_position(noon, *coords)

        assert position.azimuth_deg == pytest.approx(180.0, abs=2.0)
        expected = compute_angles(noon, *coords).transit_elevation
        assert position.altitude_deg == pytest.approx(expected, abs=0.5)


class TestInputValidation:
    def test_invalid_latitude(self):
        with pytest.raises(InvalidCoordinateError):
            get_sun_position(datetime(2019, 1, 24, tzinfo=timezone.utc), 200, 6.97337)

    def test_naive_datetime(self, sample_coordinates):
        with pytest.raises(NaiveDatetimeError):
            get_sun_position(datetime(2019, 1, 24, 12, 0), *sample_coordinates.to_tuple())
