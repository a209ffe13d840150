import asyncio
from datetime import datetime, timezone
from typing import Dict, List, Optional

from loguru import logger

from blue_sky_alerts.models.location import Location
from blue_sky_alerts.models.weather import Alert, PollResult, WeatherSnapshot, build_alerts
from blue_sky_alerts.services.location_registry import LocationRegistry
from blue_sky_alerts.services.poller import WeatherPoller


class DashboardState:
    """
    DashboardState owns everything the dashboard shows: the tracked locations,
    the latest snapshot per location, the derived alerts and the busy flag.
    It is created once at startup and handed to the page and the API; all
    changes go through its methods.
    """

    def __init__(self, registry: LocationRegistry, poller: WeatherPoller, refresh_interval: float = 30 * 60):
        self.registry = registry
        self.poller = poller
        self.refresh_interval = refresh_interval
        self._snapshots: Dict[int, WeatherSnapshot] = {}
        self._alerts: List[Alert] = []
        self._failures: Dict[int, str] = {}
        self._busy = False
        self._lock = asyncio.Lock()
        self._rerun_requested = False
        self._refresh_task: Optional[asyncio.Task] = None
        self._cycle_task: Optional[asyncio.Task] = None
        self._pending: set = set()
        self.last_updated: Optional[datetime] = None
        self.revision = 0
        logger.info(f"DashboardState initialized with {len(registry)} location(s)")

    # Read access

    def get_locations(self) -> List[Location]:
        return self.registry.snapshot()

    def get_snapshot(self, location_id: int) -> Optional[WeatherSnapshot]:
        return self._snapshots.get(location_id)

    def get_failure(self, location_id: int) -> Optional[str]:
        """Why the latest fetch for a location failed, if it did"""
        return self._failures.get(location_id)

    def get_alerts(self) -> List[Alert]:
        return list(self._alerts)

    def is_busy(self) -> bool:
        return self._busy

    # Registry changes

    def add_location(self, name: str) -> Location:
        """Track a supported city and poll for it.

        Raises:
            LocationNotFound: if the city is not supported; nothing changes
        """
        location = self.registry.add(name)
        self._touch()
        self.request_refresh()
        return location

    def remove_location(self, location_id: int) -> bool:
        """Stop tracking a location and drop its weather data. Idempotent."""
        if not self.registry.remove(location_id):
            logger.debug(f"Location {location_id} not tracked, nothing to remove")
            return False
        self._snapshots.pop(location_id, None)
        self._failures.pop(location_id, None)
        self._alerts = [alert for alert in self._alerts if alert.location_id != location_id]
        self._touch()
        self.request_refresh()
        return True

    # Polling

    async def refresh(self, coalesce: bool = False) -> bool:
        """Run one poll cycle.

        Returns False without polling if a cycle is already running. With
        ``coalesce`` the running cycle is asked to poll once more when done.
        """
        if self._lock.locked():
            if coalesce:
                self._rerun_requested = True
                logger.debug("Poll already running, follow-up cycle requested")
            return False

        async with self._lock:
            self._busy = True
            self._cycle_task = asyncio.current_task()
            self._touch()
            try:
                while True:
                    self._rerun_requested = False
                    result = await self.poller.poll_all(self.registry.snapshot())
                    self._apply(result)
                    if not self._rerun_requested:
                        break
            finally:
                self._busy = False
                self._cycle_task = None
                self._touch()
        return True

    def request_refresh(self):
        """Poll soon in the background, e.g. after the location list changed"""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop, refresh deferred to next cycle")
            return
        task = loop.create_task(self.refresh(coalesce=True))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    def _apply(self, result: PollResult):
        """Replace snapshots and alerts wholesale, keeping only tracked locations"""
        tracked = self.registry.ids()
        self._snapshots = {lid: snap for lid, snap in result.snapshots.items() if lid in tracked}
        self._failures = {lid: reason for lid, reason in result.failures.items() if lid in tracked}
        self._alerts = build_alerts(self.registry.snapshot(), self._snapshots)
        self.last_updated = datetime.now(timezone.utc)
        if self._alerts:
            names = ', '.join(alert.location_name for alert in self._alerts)
            logger.info(f"Blue sky alert for: {names}")
        self._touch()

    def _touch(self):
        self.revision += 1

    # Lifecycle

    def start(self):
        """Start the recurring refresh task. Must be called from a running event loop."""
        if self._refresh_task and not self._refresh_task.done():
            return
        self._refresh_task = asyncio.get_running_loop().create_task(self._auto_refresh())
        logger.info(f"Auto refresh started, every {self.refresh_interval / 60:g} minutes")

    async def _auto_refresh(self):
        while True:
            try:
                if not await self.refresh():
                    logger.info("Scheduled refresh skipped, poll already running")
            except Exception as e:
                logger.exception(f"Error in scheduled refresh: {e}")
            await asyncio.sleep(self.refresh_interval)

    async def stop(self):
        """Cancel the recurring task and any in-flight poll, manual ones included"""
        candidates = {self._refresh_task, self._cycle_task, *self._pending}
        tasks = [task for task in candidates if task and not task.done()]
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._refresh_task = None
        logger.info("Auto refresh stopped")

    async def shutdown(self):
        await self.stop()
        self.poller.weather_service.close()
