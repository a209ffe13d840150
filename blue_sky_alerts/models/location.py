"""Location model for tracked cities"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """A tracked location. The id is the key for snapshots and alerts."""
    id: int
    name: str
    lat: float
    lon: float

    def to_dict(self) -> dict:
        return {'id': self.id, 'name': self.name, 'lat': self.lat, 'lon': self.lon}
