import asyncio
import logging

from appraisal.models.base_model import Location, PickSource, Route
from appraisal.repos.session_repo import SessionRepository
from appraisal.services.quote_service import QuoteSession
from appraisal.services.route_service import RouteFetchError
from conftest import OFFICE, osrm_payload


async def test_new_session_defaults(osrm):
    quote = QuoteSession("s1", osrm.service()).snapshot()

    assert quote.area == 20
    assert quote.floors == 1
    assert quote.location is None
    assert quote.has_route is False
    assert quote.duration_label == ""
    assert quote.breakdown.total == 100000


async def test_select_location_updates_route_and_price(osrm):
    osrm.queue(body=osrm_payload(distance_m=10000, duration_s=900))
    session = QuoteSession("s1", osrm.service())
    session.update_inputs(area=60, floors=2)

    quote = await session.select_location(4.7, -74.05)

    assert quote.location == Location(lat=4.7, lng=-74.05)
    assert quote.has_route is True
    assert quote.distance_km == 10
    assert quote.duration_label == "15.00 minutos"
    assert len(quote.path) == 3
    assert quote.breakdown.total == 550000


async def test_route_failure_keeps_previous_route(osrm, caplog):
    osrm.queue(body=osrm_payload(distance_m=10000, duration_s=900))
    osrm.queue(status=503, body={"message": "unavailable"})
    session = QuoteSession("s1", osrm.service())
    await session.select_location(4.7, -74.05)

    with caplog.at_level(logging.ERROR):
        quote = await session.select_location(4.8, -74.1)

    assert quote.location == Location(lat=4.8, lng=-74.1)
    assert quote.distance_km == 10
    assert quote.duration_label == "15.00 minutos"
    assert len(quote.path) == 3
    assert "Error fetching route" in caplog.text


async def test_route_failure_before_any_route_leaves_zero_values(osrm):
    session = QuoteSession("s1", osrm.service())

    quote = await session.select_location(4.7, -74.05)

    assert quote.has_route is False
    assert quote.distance_km == 0
    assert quote.path == []


class ControlledRoutes:
    """Route service whose responses are released by the test."""

    def __init__(self):
        self.origin = OFFICE
        self.pending = {}

    async def fetch_route(self, destination):
        release = asyncio.Event()
        self.pending[destination.lat] = release
        await release.wait()
        if destination.lat < 0:
            raise RouteFetchError("boom")
        return Route(distance_km=destination.lat, duration_minutes=1, path=[destination])


async def test_superseded_pick_does_not_overwrite_latest_route():
    routes = ControlledRoutes()
    session = QuoteSession("s1", routes)

    first = asyncio.create_task(session.select_location(1.0, -74.0))
    second = asyncio.create_task(session.select_location(2.0, -74.0))
    await asyncio.sleep(0)

    routes.pending[2.0].set()
    await second
    routes.pending[1.0].set()
    await first

    quote = session.snapshot()
    assert quote.distance_km == 2.0
    assert quote.location == Location(lat=2.0, lng=-74.0)


async def test_geocoder_pick_is_recorded(osrm):
    osrm.queue(body=osrm_payload())
    session = QuoteSession("s1", osrm.service())

    await session.select_location(4.7, -74.05, PickSource.GEOCODER)

    assert session.picker.has_selection


def test_repository_creates_and_clears_sessions(osrm):
    repo = SessionRepository(route_service_factory=osrm.service)

    session = repo.get_session("abc")
    assert repo.get_session("abc") is session
    assert repo.clear_session("abc") is True
    assert repo.clear_session("abc") is False
    assert repo.get_session("abc") is not session


async def test_any_picker_selection_supersedes_inflight_fetch():
    routes = ControlledRoutes()
    session = QuoteSession("s1", routes)

    pending = asyncio.create_task(session.select_location(1.0, -74.0))
    await asyncio.sleep(0)
    # A pick notified through the picker callback counts as a newer request
    session.picker.pick(Location(lat=3.0, lng=-74.0), PickSource.GEOCODER)
    routes.pending[1.0].set()
    quote = await pending

    assert quote.distance_km == 0
    assert quote.location == Location(lat=3.0, lng=-74.0)
