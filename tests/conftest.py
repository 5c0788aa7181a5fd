import pytest

from schemas.models import EarthquakeEvent


class FakeResponse:
    """Just enough of requests.Response for the code under test."""

    def __init__(self, status_code=200, payload=None, url="https://example.test/query", body_error=None):
        self.status_code = status_code
        self._payload = payload
        self._body_error = body_error
        self.url = url

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._body_error is not None:
            raise self._body_error
        return self._payload


@pytest.fixture
def feature():
    def make(id="us7000abcd", lng=139.7, lat=35.7, depth=10, mag=6.2,
             place="Tokyo, Japan", time=1700000000000, **props):
        properties = {
            "mag": mag,
            "place": place,
            "time": time,
            "updated": time + 60000 if time is not None else None,
            "title": f"M {mag} - {place}",
            "url": f"https://earthquake.usgs.gov/earthquakes/eventpage/{id}",
            "tsunami": 0,
            "type": "earthquake",
            "status": "reviewed",
        }
        properties.update(props)
        return {
            "type": "Feature",
            "id": id,
            "geometry": {"type": "Point", "coordinates": [lng, lat, depth]},
            "properties": properties,
        }
    return make


@pytest.fixture
def make_event():
    counter = iter(range(10_000))

    def make(magnitude=5.0, lat=0.0, lng=0.0, place="Somewhere", time=1700000000000, **kw):
        return EarthquakeEvent(
            id=kw.pop("id", f"ev{next(counter)}"),
            magnitude=magnitude, lat=lat, lng=lng, place=place, time=time,
            depth=kw.pop("depth", 10.0), **kw,
        )
    return make


@pytest.fixture
def fake_response():
    return FakeResponse
