"""Application settings loaded from the environment"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv
from loguru import logger

load_dotenv()  # Load environment variables from .env file

DEFAULT_WEATHER_API_URL = "https://api.open-meteo.com/v1/forecast"


def _get_number(name: str, default, cast=float):
    """Read a numeric variable, falling back to the default on bad input"""
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        value = cast(raw)
    except ValueError:
        logger.warning(f"Invalid value for {name}: {raw!r}, using {default}")
        return default
    if value <= 0:
        logger.warning(f"{name} must be positive, using {default}")
        return default
    return value


@dataclass
class Settings:
    weather_api_url: str = DEFAULT_WEATHER_API_URL
    weather_timezone: str = "Europe/London"
    request_timeout: float = 10.0
    refresh_interval_minutes: float = 30.0
    log_level: str = "INFO"
    log_file: str = "logs/app.log"
    host: str = "0.0.0.0"
    port: int = 8080

    @property
    def refresh_interval(self) -> float:
        """Refresh interval in seconds"""
        return self.refresh_interval_minutes * 60

    @classmethod
    def from_env(cls) -> 'Settings':
        return cls(
            weather_api_url=os.getenv('WEATHER_API_URL', DEFAULT_WEATHER_API_URL),
            weather_timezone=os.getenv('WEATHER_TIMEZONE', 'Europe/London'),
            request_timeout=_get_number('WEATHER_REQUEST_TIMEOUT', 10.0),
            refresh_interval_minutes=_get_number('REFRESH_INTERVAL_MINUTES', 30.0),
            log_level=os.getenv('LOG_LEVEL', 'INFO').upper(),
            log_file=os.getenv('LOG_FILE', 'logs/app.log'),
            host=os.getenv('APP_HOST', '0.0.0.0'),
            port=_get_number('APP_PORT', 8080, cast=int)
        )
