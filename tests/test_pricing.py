import pytest

from appraisal.models.base_model import PricePoint
from appraisal.services.pricing import PRICE_TABLE, calculate_total, format_cop, price_for_area


@pytest.mark.parametrize("point", PRICE_TABLE, ids=lambda p: f"{p.area:g}m2")
def test_breakpoints_are_exact(point):
    assert price_for_area(point.area) == point.price


def test_interpolates_between_breakpoints():
    assert price_for_area(30) == 125000
    assert price_for_area(95) == pytest.approx(287500)


def test_price_is_non_decreasing_in_area():
    areas = [a / 2 for a in range(2, 400)]
    prices = [price_for_area(a) for a in areas]
    assert all(b >= a for a, b in zip(prices, prices[1:]))


def test_extrapolates_with_edge_slopes():
    assert price_for_area(140) == 400000
    assert price_for_area(10) == 75000


def test_custom_table():
    table = [PricePoint(area=0, price=0), PricePoint(area=10, price=100)]
    assert price_for_area(5, table) == 50
    assert price_for_area(20, table) == 200


def test_total_combines_floors_and_travel():
    breakdown = calculate_total(area=60, floors=2, distance_km=10, price_per_km=15000)
    assert breakdown.base_price == 200000
    assert breakdown.floors_price == 400000
    assert breakdown.travel_cost == 150000
    assert breakdown.total == 550000
    assert breakdown.total_label == "$ 550.000"


def test_total_uses_configured_rate_by_default():
    assert calculate_total(area=20, floors=1, distance_km=2).total == 100000 + 2 * 15000


@pytest.mark.parametrize("amount,label", [
    (0, "$ 0"),
    (999, "$ 999"),
    (1234567, "$ 1.234.567"),
    (125000.4, "$ 125.000"),
    (0.5, "$ 1"),
    (2.5, "$ 3"),
    (-1000, "-$ 1.000"),
    (-1500.5, "-$ 1.501"),
])
def test_format_cop(amount, label):
    assert format_cop(amount) == label
