from pydantic import BaseModel, Field
from typing import Optional, List
from enum import Enum

# --- Enums ---
class PickSource(str, Enum):
    CLICK = "click"
    GEOCODER = "geocoder"

# --- Domain Models ---
class Location(BaseModel):
    lat: float
    lng: float

class PricePoint(BaseModel):
    area: float
    price: float

class Route(BaseModel):
    distance_km: float = 0.0
    duration_minutes: float = 0.0
    path: List[Location] = []

    @property
    def duration_label(self) -> str:
        return f"{self.duration_minutes:.2f} minutos"

class PriceBreakdown(BaseModel):
    base_price: float
    floors_price: float
    travel_cost: float
    total: float
    total_label: str

# --- API Request/Response Models ---
class EstimateRequest(BaseModel):
    area: float = Field(..., gt=0, description="Property area in square meters")
    floors: int = Field(1, ge=1, description="Number of floors")
    distance_km: float = Field(0.0, ge=0, description="Driving distance from the office")

class QuoteInputs(BaseModel):
    area: Optional[float] = Field(None, gt=0)
    floors: Optional[int] = Field(None, ge=1)

class LocationPick(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    source: PickSource = PickSource.CLICK

class QuoteResponse(BaseModel):
    session_id: str
    area: float
    floors: int
    location: Optional[Location] = None
    has_route: bool = False
    distance_km: float = 0.0
    duration_label: str = ""
    path: List[Location] = []
    breakdown: PriceBreakdown
