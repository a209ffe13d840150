"""
Tests for WeatherPoller
"""
import pytest

from blue_sky_alerts.services.poller import WeatherPoller
from tests.fakes import FakeWeatherService, snapshot


@pytest.mark.asyncio
async def test_poll_all_builds_snapshots_and_alerts(locations, weather_service):
    result = await WeatherPoller(weather_service).poll_all(locations)

    assert set(result.snapshots) == {1, 2, 3}
    assert result.snapshots[1].temperature_c == 18
    assert result.snapshots[3].temperature_c == 17
    assert [alert.location_name for alert in result.alerts] == ['London', 'Oxford']
    assert result.failures == {}


@pytest.mark.asyncio
async def test_one_failure_does_not_abort_the_batch(locations, log_messages):
    service = FakeWeatherService({
        'London': snapshot(18.0, 0, 5),
        # Manchester has no reading and fails
        'Oxford': snapshot(16.0, 1, 20),
    })

    result = await WeatherPoller(service).poll_all(locations)

    assert set(result.snapshots) == {1, 3}
    assert 2 not in result.snapshots
    assert result.failures == {2: "no data"}
    assert [alert.location_id for alert in result.alerts] == [1, 3]
    assert any("Manchester" in message for message in log_messages)


@pytest.mark.asyncio
async def test_unexpected_error_is_contained(locations):
    service = FakeWeatherService({
        'London': KeyError('current'),
        'Manchester': snapshot(11.0, 3, 90),
        'Oxford': snapshot(16.0, 1, 20),
    })

    result = await WeatherPoller(service).poll_all(locations)

    assert set(result.snapshots) == {2, 3}
    assert "unexpected error" in result.failures[1]
    assert [alert.location_id for alert in result.alerts] == [3]


@pytest.mark.asyncio
async def test_all_failures(locations):
    result = await WeatherPoller(FakeWeatherService()).poll_all(locations)
    assert result.snapshots == {}
    assert result.alerts == []
    assert set(result.failures) == {1, 2, 3}


@pytest.mark.asyncio
async def test_no_locations(weather_service):
    result = await WeatherPoller(weather_service).poll_all([])
    assert result.snapshots == {}
    assert result.alerts == []
    assert weather_service.calls == []


@pytest.mark.asyncio
async def test_one_request_per_location(locations, weather_service):
    await WeatherPoller(weather_service).poll_all(locations)
    assert sorted(weather_service.calls) == ['London', 'Manchester', 'Oxford']
