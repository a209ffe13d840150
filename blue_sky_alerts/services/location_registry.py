"""Ordered registry of tracked locations"""
import itertools
from typing import Iterable, Iterator, List, Optional

from loguru import logger

from blue_sky_alerts.constants.cities import SUPPORTED_CITIES
from blue_sky_alerts.exceptions import LocationNotFound
from blue_sky_alerts.models.location import Location


class LocationRegistry:
    """Tracked locations in insertion order.

    New locations can only come from the static city table; there is no
    geocoding. Ids are never reused.
    """

    def __init__(self, locations: Iterable[Location] = (), cities: Optional[dict] = None):
        self._locations: List[Location] = []
        self._cities = SUPPORTED_CITIES if cities is None else cities
        for location in locations:
            self._append(location)
        start = max((loc.id for loc in self._locations), default=0) + 1
        self._ids = itertools.count(start)

    @classmethod
    def from_dicts(cls, entries: Iterable[dict]) -> 'LocationRegistry':
        return cls(Location(**entry) for entry in entries)

    def _append(self, location: Location):
        if location.id in self:
            raise ValueError(f"Duplicate location id {location.id}")
        self._locations.append(location)

    def add(self, name: str) -> Location:
        """Add a supported city by name (case-insensitive).

        Raises:
            LocationNotFound: if the name is not in the city table
        """
        key = (name or '').strip().lower()
        coords = self._cities.get(key)
        if not key or coords is None:
            logger.info(f"City not found: {name!r}")
            raise LocationNotFound(name)

        location = Location(id=next(self._ids), name=key.capitalize(), lat=coords['lat'], lon=coords['lon'])
        self._append(location)
        logger.info(f"Added location {location.name} (id={location.id})")
        return location

    def remove(self, location_id: int) -> bool:
        """Remove a location by id. Returns False if it was not tracked."""
        for index, location in enumerate(self._locations):
            if location.id == location_id:
                del self._locations[index]
                logger.info(f"Removed location {location.name} (id={location_id})")
                return True
        return False

    def get(self, location_id: int) -> Optional[Location]:
        return next((loc for loc in self._locations if loc.id == location_id), None)

    def ids(self) -> set:
        return {loc.id for loc in self._locations}

    def snapshot(self) -> List[Location]:
        """Copy of the current list, safe to iterate while the registry changes"""
        return list(self._locations)

    def __iter__(self) -> Iterator[Location]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._locations)

    def __contains__(self, location_id) -> bool:
        return any(loc.id == location_id for loc in self._locations)
