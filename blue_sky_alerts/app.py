from nicegui import app, ui
from loguru import logger

from blue_sky_alerts.api.api import api_router
from blue_sky_alerts.config import Settings
from blue_sky_alerts.constants.cities import DEFAULT_LOCATIONS
from blue_sky_alerts.pages.dashboard_page import DashboardPage
from blue_sky_alerts.services.location_registry import LocationRegistry
from blue_sky_alerts.services.poller import WeatherPoller
from blue_sky_alerts.services.weather_service import WeatherService
from blue_sky_alerts.utils.logger import setup_logging
from blue_sky_alerts.utils.state_manager import DashboardState


def create_state(settings: Settings) -> DashboardState:
    """Build the dashboard state with the default locations"""
    weather_service = WeatherService(
        base_url=settings.weather_api_url,
        timezone=settings.weather_timezone,
        timeout=settings.request_timeout
    )
    registry = LocationRegistry.from_dicts(DEFAULT_LOCATIONS)
    return DashboardState(registry, WeatherPoller(weather_service), refresh_interval=settings.refresh_interval)


def init(settings: Settings) -> DashboardState:
    """Initialize the application"""
    try:
        logger.info("Initializing application")
        state = create_state(settings)
        dashboard_page = DashboardPage(state)

        app.state.dashboard = state
        app.include_router(api_router)
        app.on_startup(state.start)
        app.on_shutdown(state.shutdown)

        @ui.page('/')
        def home():
            dashboard_page.create_page()

        logger.info("Application initialized successfully")
        return state

    except Exception as e:
        logger.error(f"Error initializing application: {str(e)}")
        raise


def main():
    settings = Settings.from_env()
    setup_logging(settings.log_file, settings.log_level)
    init(settings)
    ui.run(title='UK Blue Sky Alerts', favicon='☀️', host=settings.host, port=settings.port, reload=False)
