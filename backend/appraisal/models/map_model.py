from pydantic import BaseModel
from typing import Optional, List

from appraisal.models.base_model import Location

class Marker(BaseModel):
    kind: str  # "office" or "selection"
    position: Location
    popup: str

class Polyline(BaseModel):
    positions: List[Location]
    color: str = "blue"

class MapView(BaseModel):
    center: Location
    zoom: int
    tile_url: str
    tile_attribution: str
    markers: List[Marker]
    route: Optional[Polyline] = None

class GeocodeResult(BaseModel):
    name: str
    display_name: str
    lat: float
    lng: float
