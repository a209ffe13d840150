"""Polls the weather service for every location and derives alerts"""
import asyncio
from typing import List

from loguru import logger

from blue_sky_alerts.exceptions import FetchFailure
from blue_sky_alerts.models.location import Location
from blue_sky_alerts.models.weather import PollResult, build_alerts
from blue_sky_alerts.services.weather_service import WeatherService


class WeatherPoller:
    """Runs one poll cycle over a list of locations"""

    def __init__(self, weather_service: WeatherService):
        self.weather_service = weather_service

    async def poll_all(self, locations: List[Location]) -> PollResult:
        """Fetch every location concurrently.

        A failed location is logged and left out of the snapshots; it never
        aborts the batch.
        """
        locations = list(locations)
        result = PollResult()
        if not locations:
            return result

        loop = asyncio.get_running_loop()
        # Sync requests run in the default executor so fetches overlap
        outcomes = await asyncio.gather(
            *(loop.run_in_executor(None, self.weather_service.get_current, location) for location in locations),
            return_exceptions=True
        )

        for location, outcome in zip(locations, outcomes):
            if isinstance(outcome, FetchFailure):
                logger.warning(str(outcome))
                result.failures[location.id] = outcome.reason
            elif isinstance(outcome, Exception):
                logger.opt(exception=outcome).error(f"Unexpected error fetching weather for {location.name}")
                result.failures[location.id] = f"unexpected error: {outcome}"
            elif isinstance(outcome, BaseException):
                raise outcome
            else:
                result.snapshots[location.id] = outcome

        result.alerts = build_alerts(locations, result.snapshots)
        logger.info(f"Polled {len(locations)} location(s): {len(result.snapshots)} ok, "
                    f"{len(result.failures)} failed, {len(result.alerts)} alert(s)")
        return result
