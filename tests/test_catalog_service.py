import pytest

from appraisal.data.catalog import SERVICES
from appraisal.models.service_model import Service, ServiceFilter
from appraisal.services.catalog_service import (
    PRICE_RANGES,
    categories,
    filter_services,
    parse_price,
    types,
)

CATALOG = [
    Service(name="Avalúo de casa", price_label="$450.000", category="Urbanos", type="Residencial"),
    Service(name="Avalúo de bodega", price_label="$1.200.000", category="Urbanos", type="Industrial"),
    Service(name="Avalúo de finca", price_label="$800.000", category="Rurales", type="Residencial"),
]


@pytest.mark.parametrize("label,price", [
    ("$450.000", 450000),
    ("Desde $1.200.000", 1200000),
    ("$ 12,5", 125),
    ("A convenir", 0),
    ("", 0),
])
def test_parse_price(label, price):
    assert parse_price(label) == price


def test_no_filters_returns_whole_catalog_in_order():
    assert filter_services(CATALOG, ServiceFilter()) == CATALOG


def test_category_and_price_bucket_are_conjunctive():
    result = filter_services(CATALOG, ServiceFilter(categories=["Urbanos"], price_range="$0 - $500.000"))
    assert [s.name for s in result] == ["Avalúo de casa"]


def test_type_and_search_are_conjunctive():
    result = filter_services(CATALOG, ServiceFilter(search_text="FINCA", types=["Residencial"]))
    assert [s.name for s in result] == ["Avalúo de finca"]


def test_bucket_bounds_are_inclusive():
    service = Service(name="x", price_label="$500.001", category="c", type="t")
    assert filter_services([service], ServiceFilter(price_range="$500.001 - $1.000.000")) == [service]


def test_open_bucket_and_unknown_bucket():
    assert [s.name for s in filter_services(SERVICES, ServiceFilter(price_range="Más de $5.000.000"))] == [
        "Avalúo de hacienda productiva",
        "Avalúo de planta industrial",
        "Avalúo NIIF de activos fijos",
    ]
    assert filter_services(CATALOG, ServiceFilter(price_range="no such bucket")) == CATALOG


def test_facets_keep_first_seen_order():
    assert categories(CATALOG) == ["Urbanos", "Rurales"]
    assert types(CATALOG) == ["Residencial", "Industrial"]
    assert len(PRICE_RANGES) == 4

