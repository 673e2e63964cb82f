import httpx
import logging
from typing import Optional

from appraisal.core.config import settings
from appraisal.core.logger import logs
from appraisal.models.base_model import Location, Route


class RouteFetchError(Exception):
    """Raised when the routing service cannot produce a usable route."""


class RouteService:
    def __init__(
        self,
        origin: Optional[Location] = None,
        base_url: str = None,
        timeout: float = None,
        transport: httpx.AsyncBaseTransport = None,
    ):
        self.origin = origin or Location(lat=settings.OFFICE_LAT, lng=settings.OFFICE_LNG)
        self.base_url = (base_url or settings.OSRM_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT
        self.transport = transport

    def _route_url(self, destination: Location) -> str:
        # OSRM wants lng,lat pairs
        return (
            f"{self.base_url}/route/v1/driving/"
            f"{self.origin.lng},{self.origin.lat};{destination.lng},{destination.lat}"
        )

    async def fetch_route(self, destination: Location) -> Route:
        """
        Asks OSRM for the driving route from the office to `destination`.
        Raises RouteFetchError on any network, HTTP or payload problem.
        """
        url = self._route_url(destination)
        params = {"overview": "full", "geometries": "geojson", "steps": "true"}
        logs.log(logging.INFO, f"Requesting route to {destination.lat}, {destination.lng}")

        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            try:
                resp = await client.get(url, params=params)
                resp.raise_for_status()
                raw_data = resp.json()
            except (httpx.HTTPError, ValueError) as e:
                raise RouteFetchError(f"Routing request failed: {str(e)}") from e

        return self._parse_route(raw_data)

    def _parse_route(self, raw_data: dict) -> Route:
        try:
            route = raw_data["routes"][0]
            leg = route["legs"][0]
            path = [
                Location(lat=coord[1], lng=coord[0])
                for coord in route["geometry"]["coordinates"]
            ]
            return Route(
                distance_km=leg["distance"] / 1000,
                duration_minutes=leg["duration"] / 60,
                path=path,
            )
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise RouteFetchError(f"Unexpected routing payload: {str(e)}") from e
