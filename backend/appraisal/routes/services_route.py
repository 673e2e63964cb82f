from typing import List, Optional

from fastapi import APIRouter, Query

from appraisal.data.catalog import SERVICES
from appraisal.models.service_model import CatalogFacets, ServiceFilter, ServiceListResponse
from appraisal.services import catalog_service

router = APIRouter(prefix="/services", tags=["services"])

@router.get("", response_model=ServiceListResponse)
async def list_services_endpoint(
    q: str = "",
    price_range: Optional[str] = None,
    category: List[str] = Query([]),
    service_types: List[str] = Query([], alias="type"),
):
    service_filter = ServiceFilter(search_text=q, price_range=price_range, categories=category, types=service_types)
    services = catalog_service.filter_services(SERVICES, service_filter)
    return ServiceListResponse(
        services=services,
        total=len(services),
        message=None if services else catalog_service.NO_RESULTS_MESSAGE,
    )

@router.get("/facets", response_model=CatalogFacets)
async def facets_endpoint():
    return CatalogFacets(
        categories=catalog_service.categories(SERVICES),
        types=catalog_service.types(SERVICES),
        price_ranges=[r.label for r in catalog_service.PRICE_RANGES],
    )
