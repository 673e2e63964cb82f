from fastapi import APIRouter, Depends, HTTPException

from appraisal.models.base_model import EstimateRequest, LocationPick, PriceBreakdown, QuoteInputs, QuoteResponse
from appraisal.repos.session_repo import SessionRepository, session_repo
from appraisal.services.pricing import calculate_total
from appraisal.core.logger import logs

router = APIRouter(prefix="/quote", tags=["quote"])

# --- Dependency Injection ---
def get_session_repo() -> SessionRepository:
    return session_repo

@router.post("/estimate", response_model=PriceBreakdown)
async def estimate_endpoint(request: EstimateRequest):
    """Stateless price for a given area, floor count and distance."""
    return calculate_total(request.area, request.floors, request.distance_km)

@router.get("/{session_id}", response_model=QuoteResponse)
async def get_quote_endpoint(session_id: str, repo: SessionRepository = Depends(get_session_repo)):
    return repo.get_session(session_id).snapshot()

@router.put("/{session_id}", response_model=QuoteResponse)
async def update_quote_endpoint(
    session_id: str,
    request: QuoteInputs,
    repo: SessionRepository = Depends(get_session_repo)
):
    session = repo.get_session(session_id)
    session.update_inputs(area=request.area, floors=request.floors)
    return session.snapshot()

@router.post("/{session_id}/location", response_model=QuoteResponse)
async def select_location_endpoint(
    session_id: str,
    request: LocationPick,
    repo: SessionRepository = Depends(get_session_repo)
):
    """
    Records the picked location and refreshes the route from the office.
    A routing failure keeps the previous distance and time.
    """
    try:
        session = repo.get_session(session_id)
        return await session.select_location(request.lat, request.lng, request.source)
    except Exception as e:
        logs.log(40, f"Error in select_location_endpoint: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

@router.delete("/{session_id}")
async def clear_quote_endpoint(session_id: str, repo: SessionRepository = Depends(get_session_repo)):
    if not repo.clear_session(session_id):
        raise HTTPException(status_code=404, detail=f"Unknown session '{session_id}'")
    return {"status": "cleared", "session_id": session_id}
