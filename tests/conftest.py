import json

import httpx
import pytest

from appraisal.models.base_model import Location
from appraisal.services.route_service import RouteService

OFFICE = Location(lat=4.601955010311332, lng=-74.07203983933485)


def osrm_payload(distance_m=12500.0, duration_s=1230.0, coords=None):
    coords = coords if coords is not None else [[-74.072, 4.602], [-74.06, 4.65], [-74.05, 4.7]]
    return {
        "code": "Ok",
        "routes": [{
            "geometry": {"type": "LineString", "coordinates": coords},
            "legs": [{"distance": distance_m, "duration": duration_s, "steps": []}],
            "distance": distance_m,
            "duration": duration_s,
        }],
    }


class FakeOSRM:
    """Records requests and answers with queued responses."""

    def __init__(self):
        self.requests = []
        self.responses = []

    def queue(self, status=200, body=None):
        self.responses.append((status, body))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            raise httpx.ConnectError("no route queued", request=request)
        status, body = self.responses.pop(0)
        if isinstance(body, Exception):
            raise body
        content = body if isinstance(body, (bytes, str)) else json.dumps(body)
        return httpx.Response(status, content=content, headers={"content-type": "application/json"})

    def service(self) -> RouteService:
        return RouteService(origin=OFFICE, base_url="https://osrm.test", transport=httpx.MockTransport(self.handler))


@pytest.fixture
def osrm():
    return FakeOSRM()


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()
