from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from appraisal.models.map_model import GeocodeResult, MapView
from appraisal.repos.session_repo import SessionRepository
from appraisal.routes.quote_route import get_session_repo
from appraisal.services.map_service import GeocoderService

router = APIRouter(tags=["map"])

def get_geocoder() -> GeocoderService:
    return GeocoderService()

@router.get("/map/{session_id}", response_model=MapView)
async def map_view_endpoint(session_id: str, repo: SessionRepository = Depends(get_session_repo)):
    return repo.get_session(session_id).map_view()

@router.get("/geocode", response_model=List[GeocodeResult])
async def geocode_endpoint(
    q: str = Query(..., description="Address or place to look up"),
    limit: Optional[int] = Query(None, ge=1, le=20),
    geocoder: GeocoderService = Depends(get_geocoder)
):
    return await geocoder.search(q, limit)
