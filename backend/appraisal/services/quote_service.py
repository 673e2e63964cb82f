import logging
from typing import Optional

from appraisal.core.config import settings
from appraisal.core.logger import logs
from appraisal.models.base_model import Location, PickSource, QuoteResponse, Route
from appraisal.services.map_service import MapPicker
from appraisal.services.pricing import calculate_total
from appraisal.services.route_service import RouteFetchError, RouteService

DEFAULT_AREA = 20
DEFAULT_FLOORS = 1


class QuoteSession:
    """
    Quoting state for one user: inputs, picked location and the last good route.
    """

    def __init__(self, session_id: str, route_service: RouteService = None):
        self.session_id = session_id
        self.route_service = route_service or RouteService()
        self.area: float = DEFAULT_AREA
        self.floors: int = DEFAULT_FLOORS
        self.route = Route()
        # Incremented per pick; a fetch only lands if it is still the latest
        self._pick_seq = 0
        self.picker = MapPicker(office=self.route_service.origin, on_select=self._on_pick)

    def _on_pick(self, location: Location):
        self._pick_seq += 1

    @property
    def location(self) -> Optional[Location]:
        return self.picker.selection

    def update_inputs(self, area: float = None, floors: int = None):
        if area is not None:
            self.area = area
        if floors is not None:
            self.floors = floors

    async def select_location(self, lat: float, lng: float, source: PickSource = PickSource.CLICK) -> QuoteResponse:
        location = self.picker.pick(Location(lat=lat, lng=lng), source)
        seq = self._pick_seq

        try:
            route = await self.route_service.fetch_route(location)
        except RouteFetchError as e:
            logs.log(logging.ERROR, f"Error fetching route: {str(e)}", extra={"session": self.session_id})
            return self.snapshot()

        if seq != self._pick_seq:
            logs.log(logging.INFO, "Discarding route for a superseded pick", extra={"session": self.session_id})
            return self.snapshot()

        self.route = route
        logs.log(
            logging.INFO,
            f"Route updated: {route.distance_km:.2f} km, {route.duration_label}",
            extra={"session": self.session_id},
        )
        return self.snapshot()

    def snapshot(self) -> QuoteResponse:
        has_route = self.route.distance_km > 0
        return QuoteResponse(
            session_id=self.session_id,
            area=self.area,
            floors=self.floors,
            location=self.location,
            has_route=has_route,
            distance_km=self.route.distance_km,
            duration_label=self.route.duration_label if has_route else "",
            path=self.route.path,
            breakdown=calculate_total(self.area, self.floors, self.route.distance_km, settings.PRICE_PER_KM),
        )

    def map_view(self):
        return self.picker.build_view(self.route.path)
