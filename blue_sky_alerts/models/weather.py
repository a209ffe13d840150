"""Weather readings, alerts and the blue sky rule"""
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

from blue_sky_alerts.constants.weather import (
    BLUE_SKY_CODES, BLUE_SKY_MAX_CLOUD_COVER, CLEAR_SKY, MAINLY_CLEAR, OVERCAST
)


class WeatherCategory(Enum):
    SUN = "sun"
    CLOUD = "cloud"
    RAIN = "rain"


@dataclass(frozen=True)
class WeatherInfo:
    """Display classification of a weather code"""
    category: WeatherCategory
    description: str
    color: str


@dataclass(frozen=True)
class WeatherSnapshot:
    """Most recent reading for one location"""
    temperature_c: int
    weather_code: int
    cloud_cover_pct: int
    is_blue_sky: bool
    fetched_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_reading(cls, temperature: float, weather_code: int, cloud_cover: int) -> 'WeatherSnapshot':
        """Build a snapshot from raw provider values"""
        return cls(
            temperature_c=round_temperature(temperature),
            weather_code=weather_code,
            cloud_cover_pct=cloud_cover,
            is_blue_sky=is_blue_sky(weather_code, cloud_cover)
        )

    @property
    def info(self) -> WeatherInfo:
        return classify(self.weather_code)


@dataclass(frozen=True)
class Alert:
    """Blue sky alert for one location"""
    location_id: int
    location_name: str
    temperature_c: int
    cloud_cover_pct: int


@dataclass
class PollResult:
    """Outcome of one poll cycle.

    Snapshots and alerts replace the previous cycle's wholesale. Locations
    whose fetch failed have no snapshot and an entry in ``failures``.
    """
    snapshots: Dict[int, WeatherSnapshot] = field(default_factory=dict)
    alerts: List[Alert] = field(default_factory=list)
    failures: Dict[int, str] = field(default_factory=dict)


def is_blue_sky(weather_code: int, cloud_cover_pct: float) -> bool:
    """Clear or mainly clear with cloud cover strictly below the threshold"""
    return weather_code in BLUE_SKY_CODES and cloud_cover_pct < BLUE_SKY_MAX_CLOUD_COVER


def classify(weather_code: Optional[int]) -> WeatherInfo:
    """Map a weather code to its icon category, description and color.

    Everything above overcast falls into the rain bucket.
    """
    if weather_code == CLEAR_SKY:
        return WeatherInfo(WeatherCategory.SUN, 'Clear sky', 'text-yellow-500')
    if weather_code == MAINLY_CLEAR:
        return WeatherInfo(WeatherCategory.SUN, 'Mainly clear', 'text-yellow-400')
    if weather_code is not None and weather_code <= OVERCAST:
        return WeatherInfo(WeatherCategory.CLOUD, 'Cloudy', 'text-gray-400')
    return WeatherInfo(WeatherCategory.RAIN, 'Rain', 'text-blue-400')


def round_temperature(value: float) -> int:
    """Round half up, so 12.5 becomes 13 and -0.5 becomes 0"""
    return int(math.floor(value + 0.5))


def build_alerts(locations, snapshots: Dict[int, WeatherSnapshot]) -> List[Alert]:
    """Alerts for every location whose snapshot is a blue sky day, in location order"""
    alerts = []
    for location in locations:
        snapshot = snapshots.get(location.id)
        if snapshot and snapshot.is_blue_sky:
            alerts.append(Alert(
                location_id=location.id,
                location_name=location.name,
                temperature_c=snapshot.temperature_c,
                cloud_cover_pct=snapshot.cloud_cover_pct
            ))
    return alerts
