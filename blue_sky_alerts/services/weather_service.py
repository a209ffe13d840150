"""Weather service to fetch current conditions from Open-Meteo"""
from typing import Optional

import requests
from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from blue_sky_alerts.config import DEFAULT_WEATHER_API_URL
from blue_sky_alerts.constants.weather import CURRENT_FIELDS
from blue_sky_alerts.exceptions import FetchFailure
from blue_sky_alerts.models.location import Location
from blue_sky_alerts.models.weather import WeatherSnapshot


class CurrentConditions(BaseModel):
    """The ``current`` object of a forecast response"""
    temperature_2m: float
    weather_code: int
    cloud_cover: int = Field(..., ge=0, le=100)


class ForecastResponse(BaseModel):
    current: CurrentConditions


class WeatherService:
    """Service to fetch current weather per location"""

    def __init__(self, base_url: str = DEFAULT_WEATHER_API_URL, timezone: str = "Europe/London",
                 timeout: float = 10.0, session: Optional[requests.Session] = None):
        """Initialize weather service

        Args:
            base_url: Forecast endpoint
            timezone: Timezone the provider reports times in
            timeout: Per-request timeout in seconds
            session: HTTP session, a new one is created if omitted
        """
        self.base_url = base_url
        self.timezone = timezone
        self.timeout = timeout
        self.session = session or requests.Session()

    def build_params(self, location: Location) -> dict:
        """Query parameters for one location"""
        return {
            'latitude': location.lat,
            'longitude': location.lon,
            'current': ','.join(CURRENT_FIELDS),
            'timezone': self.timezone
        }

    def get_current(self, location: Location) -> WeatherSnapshot:
        """Get current weather for location

        Raises:
            FetchFailure: on transport errors, non-success status or a malformed body
        """
        logger.debug(f"Fetching weather for {location.name} ({location.lat}, {location.lon})")
        try:
            response = self.session.get(self.base_url, params=self.build_params(location), timeout=self.timeout)
        except requests.Timeout:
            raise FetchFailure(location, f"request timed out after {self.timeout}s")
        except requests.RequestException as e:
            raise FetchFailure(location, f"request failed: {e}")

        # Handle common HTTP errors
        if response.status_code == 429:
            logger.warning("Weather API rate limit exceeded")
            raise FetchFailure(location, "rate limit exceeded")
        if not 200 <= response.status_code < 300:
            raise FetchFailure(location, f"HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError:
            raise FetchFailure(location, "response is not valid JSON")

        try:
            current = ForecastResponse.model_validate(payload).current
        except ValidationError as e:
            raise FetchFailure(location, f"unexpected response: {e.error_count()} invalid field(s)")

        snapshot = WeatherSnapshot.from_reading(current.temperature_2m, current.weather_code, current.cloud_cover)
        logger.debug(f"Weather for {location.name}: {snapshot.temperature_c}°C, code {snapshot.weather_code}, "
                     f"{snapshot.cloud_cover_pct}% cloud")
        return snapshot

    def close(self):
        """Close the underlying HTTP session"""
        self.session.close()
