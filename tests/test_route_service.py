import httpx
import pytest

from appraisal.models.base_model import Location
from appraisal.services.route_service import RouteFetchError
from conftest import osrm_payload

DESTINATION = Location(lat=4.7, lng=-74.05)


async def test_fetch_route_parses_distance_duration_and_path(osrm):
    osrm.queue(body=osrm_payload(distance_m=12500, duration_s=1230))

    route = await osrm.service().fetch_route(DESTINATION)

    assert route.distance_km == 12.5
    assert route.duration_minutes == 20.5
    assert route.duration_label == "20.50 minutos"
    # [lng, lat] pairs come back as lat/lng locations
    assert route.path[0] == Location(lat=4.602, lng=-74.072)
    assert route.path[-1] == Location(lat=4.7, lng=-74.05)


async def test_request_encodes_lng_lat_pairs_and_options(osrm):
    osrm.queue(body=osrm_payload())

    await osrm.service().fetch_route(DESTINATION)

    request = osrm.requests[0]
    assert request.url.path == "/route/v1/driving/-74.07203983933485,4.601955010311332;-74.05,4.7"
    assert request.url.params["overview"] == "full"
    assert request.url.params["geometries"] == "geojson"
    assert request.url.params["steps"] == "true"


@pytest.mark.parametrize("status,body", [
    (500, {"message": "boom"}),
    (200, {"code": "NoRoute", "routes": []}),
    (200, {"routes": [{"geometry": {}, "legs": []}]}),
    (200, "not json"),
])
async def test_bad_responses_raise_route_fetch_error(osrm, status, body):
    osrm.queue(status=status, body=body)

    with pytest.raises(RouteFetchError):
        await osrm.service().fetch_route(DESTINATION)


async def test_network_error_raises_route_fetch_error(osrm):
    osrm.queue(body=httpx.ConnectTimeout("timed out"))

    with pytest.raises(RouteFetchError):
        await osrm.service().fetch_route(DESTINATION)
