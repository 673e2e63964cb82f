import logging
import re
from typing import Iterable, List, Optional, Sequence

from appraisal.core.logger import logs
from appraisal.data.catalog import SERVICES
from appraisal.models.service_model import PriceRange, Service, ServiceFilter

NO_RESULTS_MESSAGE = "No se encontraron servicios que coincidan con tu búsqueda."

PRICE_RANGES: List[PriceRange] = [
    PriceRange(label="$0 - $500.000", min=0, max=500000),
    PriceRange(label="$500.001 - $1.000.000", min=500001, max=1000000),
    PriceRange(label="$1.000.001 - $5.000.000", min=1000001, max=5000000),
    PriceRange(label="Más de $5.000.000", min=5000001, max=float("inf")),
]

_DIGITS = re.compile(r"\d+")


def parse_price(label: str) -> int:
    """Joins every digit run in the label: '$1.200.000' -> 1200000."""
    digits = _DIGITS.findall(label or "")
    if digits:
        return int("".join(digits))
    return 0


def find_price_range(label: Optional[str]) -> Optional[PriceRange]:
    if not label:
        return None
    return next((r for r in PRICE_RANGES if r.label == label), None)


def _distinct(values: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(values))


def categories(services: Sequence[Service] = SERVICES) -> List[str]:
    return _distinct(s.category for s in services)


def types(services: Sequence[Service] = SERVICES) -> List[str]:
    return _distinct(s.type for s in services)


def filter_services(services: Sequence[Service], service_filter: ServiceFilter) -> List[Service]:
    """
    A service is kept only when it passes every active criterion:
    name search, price bucket, category set and type set.
    """
    term = service_filter.search_text.lower()
    price_range = find_price_range(service_filter.price_range)
    selected_categories = set(service_filter.categories)
    selected_types = set(service_filter.types)

    def matches(service: Service) -> bool:
        if term not in service.name.lower():
            return False
        if price_range is not None and not price_range.contains(parse_price(service.price_label)):
            return False
        if selected_categories and service.category not in selected_categories:
            return False
        if selected_types and service.type not in selected_types:
            return False
        return True

    result = [s for s in services if matches(s)]
    logs.log(logging.DEBUG, f"Catalog filtered: {len(result)} of {len(services)}", extra=service_filter.model_dump())
    return result
