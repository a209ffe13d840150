"""Errors raised by the registry and the weather service"""
from typing import List, Optional

from blue_sky_alerts.constants.cities import SUPPORTED_CITY_NAMES


class BlueSkyError(Exception):
    """Base class for application errors"""


class LocationNotFound(BlueSkyError):
    """Raised when a city name is not in the supported table"""

    def __init__(self, name: str, suggestions: Optional[List[str]] = None):
        self.name = name
        self.suggestions = list(suggestions or SUPPORTED_CITY_NAMES)
        super().__init__(f"City not found: '{name}'. Try: {', '.join(self.suggestions)}")


class FetchFailure(BlueSkyError):
    """Raised when current weather for a location could not be fetched"""

    def __init__(self, location, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"Error fetching weather for {location.name}: {reason}")
