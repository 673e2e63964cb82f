from pydantic import BaseModel
from typing import Optional, List

class Service(BaseModel):
    name: str
    price_label: str
    category: str
    type: str
    icon: str = "FaRegClipboard"

class PriceRange(BaseModel):
    label: str
    min: float
    max: float  # float("inf") for the open bucket

    def contains(self, price: float) -> bool:
        return self.min <= price <= self.max

class ServiceFilter(BaseModel):
    search_text: str = ""
    price_range: Optional[str] = None
    categories: List[str] = []
    types: List[str] = []

class ServiceListResponse(BaseModel):
    services: List[Service]
    total: int
    message: Optional[str] = None

class CatalogFacets(BaseModel):
    categories: List[str]
    types: List[str]
    price_ranges: List[str]
