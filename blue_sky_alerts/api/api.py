"""REST API exposing the dashboard state"""

from dataclasses import asdict
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Path, Request, Response
from loguru import logger
from pydantic import BaseModel, Field

from blue_sky_alerts.exceptions import LocationNotFound
from blue_sky_alerts.models.location import Location
from blue_sky_alerts.utils.state_manager import DashboardState

# Create API router
api_router = APIRouter(prefix="/api", tags=["blue-sky-alerts"])


def get_dashboard_state(request: Request) -> DashboardState:
    """Dashboard state stored on the application at startup"""
    state = getattr(request.app.state, 'dashboard', None)
    if state is None:
        raise HTTPException(status_code=503, detail="Dashboard state not initialized")
    return state

# -------------------------------
# Pydantic models for API
# -------------------------------

class SnapshotInfo(BaseModel):
    temperature_c: int
    weather_code: int
    cloud_cover_pct: int = Field(..., ge=0, le=100)
    is_blue_sky: bool
    description: str
    category: str
    fetched_at: datetime

class LocationInfo(BaseModel):
    id: int
    name: str
    lat: float
    lon: float
    weather: Optional[SnapshotInfo] = None
    error: Optional[str] = None

class NewLocation(BaseModel):
    name: str = Field(..., min_length=1, description="Supported UK city name, case-insensitive")

class AlertInfo(BaseModel):
    location_id: int
    location_name: str
    temperature_c: int
    cloud_cover_pct: int

class RefreshResult(BaseModel):
    refreshed: bool
    busy: bool
    last_updated: Optional[datetime] = None

class StatusInfo(BaseModel):
    busy: bool
    last_updated: Optional[datetime] = None
    location_count: int
    alert_count: int


def _location_info(state: DashboardState, location: Location) -> LocationInfo:
    snapshot = state.get_snapshot(location.id)
    weather = None
    if snapshot:
        info = snapshot.info
        weather = SnapshotInfo(
            temperature_c=snapshot.temperature_c,
            weather_code=snapshot.weather_code,
            cloud_cover_pct=snapshot.cloud_cover_pct,
            is_blue_sky=snapshot.is_blue_sky,
            description=info.description,
            category=info.category.value,
            fetched_at=snapshot.fetched_at
        )
    return LocationInfo(**location.to_dict(), weather=weather, error=state.get_failure(location.id))

# -------------------------------
# API Endpoints
# -------------------------------

@api_router.get("/locations", response_model=List[LocationInfo])
def get_locations(state: DashboardState = Depends(get_dashboard_state)):
    """
    Get all tracked locations with their latest weather
    """
    return [_location_info(state, location) for location in state.get_locations()]


@api_router.post("/locations", response_model=LocationInfo, status_code=201)
async def add_location(
    new_location: NewLocation = Body(..., description="City to track"),
    state: DashboardState = Depends(get_dashboard_state)
):
    """
    Track a supported city. Weather is fetched in the background.
    """
    try:
        location = state.add_location(new_location.name)
    except LocationNotFound as e:
        raise HTTPException(status_code=404, detail={"message": str(e), "suggestions": e.suggestions})
    return _location_info(state, location)


@api_router.delete("/locations/{location_id}", status_code=204)
async def remove_location(
    location_id: int = Path(..., description="The ID of the location to remove"),
    state: DashboardState = Depends(get_dashboard_state)
):
    """
    Stop tracking a location. Removing an unknown id is a no-op.
    """
    state.remove_location(location_id)
    return Response(status_code=204)


@api_router.get("/alerts", response_model=List[AlertInfo])
def get_alerts(state: DashboardState = Depends(get_dashboard_state)):
    """
    Get the blue sky alerts from the latest poll
    """
    return [AlertInfo(**asdict(alert)) for alert in state.get_alerts()]


@api_router.post("/refresh", response_model=RefreshResult)
async def refresh(state: DashboardState = Depends(get_dashboard_state)):
    """
    Poll the weather provider for every location now
    """
    refreshed = await state.refresh()
    if not refreshed:
        raise HTTPException(status_code=409, detail="Refresh already in progress")
    logger.info("Manual refresh completed via API")
    return RefreshResult(refreshed=refreshed, busy=state.is_busy(), last_updated=state.last_updated)


@api_router.get("/status", response_model=StatusInfo)
def get_status(state: DashboardState = Depends(get_dashboard_state)):
    """
    Get polling status
    """
    return StatusInfo(
        busy=state.is_busy(),
        last_updated=state.last_updated,
        location_count=len(state.get_locations()),
        alert_count=len(state.get_alerts())
    )
