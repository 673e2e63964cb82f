"""
Appraisal price estimation.

The base price per floor follows a piecewise-linear curve over the property
area. Areas outside the table are extrapolated with the slope of the nearest
edge segment, so the curve stays continuous and non-decreasing everywhere.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence

from appraisal.core.config import settings
from appraisal.models.base_model import PricePoint, PriceBreakdown

PRICE_TABLE: list[PricePoint] = [
    PricePoint(area=20, price=100000),
    PricePoint(area=40, price=150000),
    PricePoint(area=60, price=200000),
    PricePoint(area=80, price=250000),
    PricePoint(area=100, price=300000),
    PricePoint(area=120, price=350000),
]


def _slope(lower: PricePoint, upper: PricePoint) -> float:
    return (upper.price - lower.price) / (upper.area - lower.area)


def price_for_area(area: float, table: Sequence[PricePoint] = PRICE_TABLE) -> float:
    """Base price for one floor of `area` square meters."""
    first, last = table[0], table[-1]

    if area < first.area:
        return first.price + _slope(first, table[1]) * (area - first.area)
    if area > last.area:
        return last.price + _slope(table[-2], last) * (area - last.area)

    for lower, upper in zip(table, table[1:]):
        if lower.area <= area <= upper.area:
            return lower.price + _slope(lower, upper) * (area - lower.area)

    # Only reachable with an unsorted table
    raise ValueError(f"Area {area} is not covered by the price table")


def format_cop(amount: float) -> str:
    """Formats pesos the way es-CO shows them: '$ 1.234.567', '-$ 1.000'."""
    pesos = int(Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    sign = "-" if pesos < 0 else ""
    return sign + "$ " + f"{abs(pesos):,}".replace(",", ".")


def calculate_total(
    area: float,
    floors: int,
    distance_km: float,
    price_per_km: float = None,
) -> PriceBreakdown:
    if price_per_km is None:
        price_per_km = settings.PRICE_PER_KM

    base_price = price_for_area(area)
    floors_price = base_price * floors
    travel_cost = distance_km * price_per_km
    total = floors_price + travel_cost

    return PriceBreakdown(
        base_price=base_price,
        floors_price=floors_price,
        travel_cost=travel_cost,
        total=total,
        total_label=format_cop(total),
    )
