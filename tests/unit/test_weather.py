"""
Tests for the blue sky rule, weather classification and alert derivation
"""
import pytest

from blue_sky_alerts.models.location import Location
from blue_sky_alerts.models.weather import (
    WeatherCategory, WeatherSnapshot, build_alerts, classify, is_blue_sky, round_temperature
)


@pytest.mark.parametrize("code, cloud, expected", [
    (0, 0, True),
    (0, 29, True),
    (1, 29.9, True),
    (1, 10, True),
    (0, 30, False),
    (1, 30, False),
    (0, 100, False),
    (2, 0, False),
    (3, 5, False),
    (45, 0, False),
    (-1, 0, False),
])
def test_is_blue_sky(code, cloud, expected):
    assert is_blue_sky(code, cloud) is expected


@pytest.mark.parametrize("code, description, category", [
    (0, "Clear sky", WeatherCategory.SUN),
    (1, "Mainly clear", WeatherCategory.SUN),
    (2, "Cloudy", WeatherCategory.CLOUD),
    (3, "Cloudy", WeatherCategory.CLOUD),
    (45, "Rain", WeatherCategory.RAIN),
    (61, "Rain", WeatherCategory.RAIN),
    (95, "Rain", WeatherCategory.RAIN),
])
def test_classify(code, description, category):
    info = classify(code)
    assert info.description == description
    assert info.category is category


def test_classify_colors():
    assert classify(0).color == 'text-yellow-500'
    assert classify(1).color == 'text-yellow-400'
    assert classify(2).color == 'text-gray-400'
    assert classify(80).color == 'text-blue-400'


def test_classify_unknown_code_is_rain():
    assert classify(None).description == "Rain"


@pytest.mark.parametrize("value, expected", [
    (12.4, 12),
    (12.5, 13),
    (13.5, 14),
    (-0.5, 0),
    (-0.6, -1),
    (-3.2, -3),
    (0.0, 0),
])
def test_round_temperature_half_up(value, expected):
    assert round_temperature(value) == expected


def test_snapshot_from_reading():
    snap = WeatherSnapshot.from_reading(21.7, 1, 12)
    assert snap.temperature_c == 22
    assert snap.weather_code == 1
    assert snap.cloud_cover_pct == 12
    assert snap.is_blue_sky is True
    assert snap.info.description == "Mainly clear"
    assert snap.fetched_at.tzinfo is not None


def test_build_alerts_is_exactly_the_blue_sky_subset():
    locations = [
        Location(1, 'London', 51.5074, -0.1278),
        Location(2, 'Manchester', 53.4808, -2.2426),
        Location(3, 'Oxford', 51.7520, -1.2577),
        Location(4, 'Leeds', 53.8008, -1.5491),
    ]
    snapshots = {
        1: WeatherSnapshot.from_reading(18.0, 0, 5),
        2: WeatherSnapshot.from_reading(11.0, 3, 90),
        3: WeatherSnapshot.from_reading(16.4, 1, 29),
        # Leeds has no snapshot
    }

    alerts = build_alerts(locations, snapshots)

    assert [alert.location_id for alert in alerts] == [1, 3]
    assert alerts[1].location_name == 'Oxford'
    assert alerts[1].temperature_c == 16
    assert alerts[1].cloud_cover_pct == 29


def test_build_alerts_empty():
    assert build_alerts([], {}) == []
