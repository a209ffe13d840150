import pytest
from loguru import logger

from blue_sky_alerts.constants.cities import DEFAULT_LOCATIONS
from blue_sky_alerts.models.location import Location
from blue_sky_alerts.services.location_registry import LocationRegistry
from blue_sky_alerts.services.poller import WeatherPoller
from blue_sky_alerts.utils.state_manager import DashboardState
from tests.fakes import FakeWeatherService, snapshot


@pytest.fixture
def locations():
    return [Location(**entry) for entry in DEFAULT_LOCATIONS] + [Location(3, 'Oxford', 51.7520, -1.2577)]


@pytest.fixture
def registry():
    return LocationRegistry.from_dicts(DEFAULT_LOCATIONS)


@pytest.fixture
def weather_service():
    return FakeWeatherService({
        'London': snapshot(18.4, 0, 5),
        'Manchester': snapshot(11.0, 3, 90),
        'Oxford': snapshot(16.6, 1, 20),
    })


@pytest.fixture
def state(registry, weather_service):
    return DashboardState(registry, WeatherPoller(weather_service), refresh_interval=0.05)


@pytest.fixture
def log_messages():
    """Messages logged through loguru while the test runs"""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record['message']), level='DEBUG')
    yield messages
    logger.remove(handler_id)
