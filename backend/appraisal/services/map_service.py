import httpx
import logging
from typing import Callable, List, Optional

from appraisal.core.config import settings
from appraisal.core.logger import logs
from appraisal.models.base_model import Location, PickSource
from appraisal.models.map_model import GeocodeResult, MapView, Marker, Polyline

OFFICE_POPUP = "Oficina del Avaluador"
SELECTION_POPUP = "Ubicación del Inmueble"


class MapPicker:
    """
    Office marker plus the user's selected location.
    Every pick (map click or geocoder result) moves the selection marker and
    notifies `on_select`.
    """

    def __init__(self, office: Optional[Location] = None, on_select: Callable[[Location], None] = None):
        self.office = office or Location(lat=settings.OFFICE_LAT, lng=settings.OFFICE_LNG)
        self.selection: Optional[Location] = None
        self.on_select = on_select

    @property
    def has_selection(self) -> bool:
        return self.selection is not None

    def pick(self, location: Location, source: PickSource = PickSource.CLICK) -> Location:
        logs.log(logging.INFO, f"Location picked via {source.value}: {location.lat}, {location.lng}")
        self.selection = location
        if self.on_select is not None:
            self.on_select(location)
        return location

    def build_view(self, path: List[Location] = None) -> MapView:
        markers = [Marker(kind="office", position=self.office, popup=OFFICE_POPUP)]
        if self.selection is not None:
            markers.append(Marker(kind="selection", position=self.selection, popup=SELECTION_POPUP))

        return MapView(
            center=self.office,
            zoom=settings.MAP_ZOOM,
            tile_url=settings.TILE_URL,
            tile_attribution=settings.TILE_ATTRIBUTION,
            markers=markers,
            route=Polyline(positions=path) if path else None,
        )


class GeocoderService:
    def __init__(self, transport: httpx.AsyncBaseTransport = None):
        self.url = settings.NOMINATIM_URL
        self.transport = transport

    async def search(self, query: str, limit: int = None) -> List[GeocodeResult]:
        """
        Calls Nominatim to turn an address into candidate coordinates.
        """
        query = (query or "").strip()
        if not query:
            return []

        params = {"q": query, "format": "json", "limit": limit or settings.GEOCODER_LIMIT}
        if settings.GEOCODER_COUNTRY_CODES:
            params["countrycodes"] = settings.GEOCODER_COUNTRY_CODES

        async with httpx.AsyncClient(transport=self.transport, timeout=settings.HTTP_TIMEOUT) as client:
            try:
                headers = {"User-Agent": settings.USER_AGENT}
                resp = await client.get(self.url, params=params, headers=headers)
                resp.raise_for_status()
                data = resp.json()

                # Nominatim answers errors as an object, results as a list
                if not isinstance(data, list):
                    logs.log(logging.ERROR, f"Unexpected geocoding payload: {str(data)[:200]}")
                    return []

                return [
                    GeocodeResult(
                        name=query,
                        display_name=item.get("display_name", query),
                        lat=float(item["lat"]),
                        lng=float(item["lon"]),
                    )
                    for item in data
                    if isinstance(item, dict)
                ]
            except (httpx.HTTPError, KeyError, TypeError, ValueError) as e:
                logs.log(logging.ERROR, f"Geocoding API error: {str(e)}")
                return []
