import pytest

from proxy.transform import feature_to_event, iso_time, to_response
from proxy.usgs import UpstreamError


def test_feature_is_flattened(feature):
    ev = feature_to_event(feature())

    assert ev.id == "us7000abcd"
    assert ev.lat == 35.7
    assert ev.lng == 139.7
    assert ev.depth == 10
    assert ev.magnitude == 6.2
    assert ev.place == "Tokyo, Japan"
    assert ev.time == 1700000000000
    assert ev.timeString == "2023-11-14T22:13:20.000Z"
    assert ev.tsunami == 0
    assert ev.type == "earthquake"
    assert ev.status == "reviewed"
    assert ev.updated == 1700000060000


def test_missing_values_pass_through_as_none(feature):
    f = feature(mag=None, depth=None)
    f["geometry"]["coordinates"] = [12.0, 41.0]
    del f["properties"]["time"]

    ev = feature_to_event(f)
    assert ev.magnitude is None
    assert ev.depth is None
    assert ev.time is None
    assert ev.timeString is None


def test_negative_depth_is_not_validated(feature):
    assert feature_to_event(feature(depth=-1.5)).depth == -1.5


def test_iso_time_keeps_milliseconds():
    assert iso_time(1700000000123) == "2023-11-14T22:13:20.123Z"
    assert iso_time(0) == "1970-01-01T00:00:00.000Z"


def test_response_preserves_order_and_metadata(feature):
    collection = {
        "type": "FeatureCollection",
        "metadata": {"generated": 1700000100000, "url": "https://u", "title": "USGS Earthquakes", "count": 2},
        "features": [feature(id="b"), feature(id="a")],
    }
    out = to_response(collection)

    assert out.count == 2
    assert [e.id for e in out.earthquakes] == ["b", "a"]
    assert out.metadata.title == "USGS Earthquakes"
    assert out.metadata.count == 2


def test_missing_feature_list_is_empty_result():
    out = to_response({"metadata": {"title": "nothing"}})
    assert out.count == 0
    assert out.earthquakes == []
    assert out.metadata.title == "nothing"
    assert out.metadata.generated is None

    assert to_response({"features": None}).count == 0
    assert to_response([]).count == 0


def test_feature_without_id_fails_the_batch(feature):
    f = feature()
    del f["id"]

    with pytest.raises(UpstreamError, match="Malformed feature"):
        to_response({"features": [feature(id="ok"), f]})


def test_features_must_be_a_list():
    with pytest.raises(UpstreamError, match="features"):
        to_response({"features": {"a": 1}})


def test_fractional_time_fails_the_batch(feature):
    with pytest.raises(UpstreamError):
        to_response({"features": [feature(time=1700000000000.5)]})
