"""Models package for locations and weather readings"""

from .location import Location
from .weather import (
    Alert, PollResult, WeatherCategory, WeatherInfo, WeatherSnapshot, build_alerts,
    classify, is_blue_sky, round_temperature
)

__all__ = [
    'Location',
    'Alert',
    'PollResult',
    'WeatherCategory',
    'WeatherInfo',
    'WeatherSnapshot',
    'build_alerts',
    'classify',
    'is_blue_sky',
    'round_temperature'
]
